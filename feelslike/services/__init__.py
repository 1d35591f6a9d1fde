"""
services package – wrappers around external APIs, plus the resolver that
sequences them.

    from feelslike.services import (
        NominatimService,
        OpenMeteoService,
        BrowserGeolocation,
        LocationResolver,
    )
"""

# Re‑export the concrete service classes for a tidy public API
from .geocoding   import NominatimService                       # noqa: F401
from .open_meteo  import OpenMeteoService                       # noqa: F401
from .geolocation import BrowserGeolocation, GeolocationError   # noqa: F401
from .resolver    import (                                      # noqa: F401
    LocationResolver,
    LookupStatus,
    LocationLookupError,
    NotFound,
    PermissionDenied,
    ServiceUnavailable,
    FetchFailed,
    GenericLocationError,
)

__all__ = [
    "NominatimService",
    "OpenMeteoService",
    "BrowserGeolocation",
    "GeolocationError",
    "LocationResolver",
    "LookupStatus",
    "LocationLookupError",
    "NotFound",
    "PermissionDenied",
    "ServiceUnavailable",
    "FetchFailed",
    "GenericLocationError",
]
