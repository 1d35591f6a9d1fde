"""
feelslike package – look up current weather for a place and estimate how
hot it feels in the shade and in direct sun.

Public entry points
-------------------
* `feelslike.main` – the command‑line driver (`python -m feelslike.main`)
* `app.py` at the repository root – the Flask web front end
* State:
    - `WeatherState`, `UnitSystem`, `Temperature`, `WindSpeed`
* Service classes:
    - `NominatimService`
    - `OpenMeteoService`
    - `BrowserGeolocation`
    - `LocationResolver`
* Utility helpers:
    - `c_to_f`, `f_to_c`, `mph_to_kph`, `kph_to_mph`
    - `shade_feels_like_f`, `sun_feels_like_f`

    >>> from feelslike import WeatherState, UnitSystem
    >>> state = WeatherState()
    >>> state.set_unit_system(UnitSystem.METRIC)
"""

__all__ = [
    "VERSION",
    # State
    "WeatherState",
    "UnitSystem",
    "Temperature",
    "WindSpeed",
    # Services
    "NominatimService",
    "OpenMeteoService",
    "BrowserGeolocation",
    "LocationResolver",
    # Utilities
    "c_to_f",
    "f_to_c",
    "mph_to_kph",
    "kph_to_mph",
    "shade_feels_like_f",
    "sun_feels_like_f",
]

VERSION = "0.1.0"


from .state import WeatherState, UnitSystem, Temperature, WindSpeed  # noqa: F401

from .services import (  # noqa: F401
    NominatimService,
    OpenMeteoService,
    BrowserGeolocation,
    LocationResolver,
)

from .utils import (  # noqa: F401
    c_to_f,
    f_to_c,
    mph_to_kph,
    kph_to_mph,
    shade_feels_like_f,
    sun_feels_like_f,
)
