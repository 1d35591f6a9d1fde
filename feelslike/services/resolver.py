"""
Turn a search query or a device position into current conditions.

A lookup moves ``IDLE → LOADING → SUCCESS | NOT_FOUND | FAILED``. Every
collaborator failure is caught where it happens and turned into one of the
``LocationLookupError`` subclasses below, whose message is what the user
sees. Nothing escapes ``search`` or ``locate``.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from ..state import WeatherState
from .geocoding import NominatimService
from .geolocation import GeolocationError
from .open_meteo import OpenMeteoService

logger = logging.getLogger(__name__)


class LookupStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILED = "failed"


# ----------------------------------------------------------------------
# Error taxonomy
# ----------------------------------------------------------------------
class LocationLookupError(Exception):
    status = LookupStatus.FAILED
    message = "Location lookup failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class NotFound(LocationLookupError):
    status = LookupStatus.NOT_FOUND

    def __init__(self, query: str):
        super().__init__(
            f'Could not find location: "{query}". Please try a different search.'
        )
        self.query = query


class ServiceUnavailable(LocationLookupError):
    message = "Failed to search for location. The search service might be unavailable."


class FetchFailed(LocationLookupError):
    message = "Failed to fetch weather data. Please try again or use manual input."


class PermissionDenied(LocationLookupError):
    message = "Location access was denied. Please allow location access to use this feature."


class GenericLocationError(LocationLookupError):
    message = "Could not access location. Please enable location services in your browser."


@dataclass(frozen=True)
class ResolvedLocation:
    latitude: float
    longitude: float
    display_name: Optional[str] = None


class LocationResolver:
    """Runs one lookup at a time against a :class:`WeatherState`."""

    def __init__(
        self,
        state: WeatherState,
        geocoder: Optional[NominatimService] = None,
        weather: Optional[OpenMeteoService] = None,
    ):
        self.state = state
        self.geocoder = geocoder or NominatimService()
        self.weather = weather or OpenMeteoService()

        self.status = LookupStatus.IDLE
        self.busy = False
        self.error: Optional[LocationLookupError] = None
        self.location: Optional[ResolvedLocation] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.user_message if self.error else None

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------
    def search(self, query: str) -> bool:
        """Look up a free‑text location. Returns True when conditions were loaded."""
        query = (query or "").strip()
        if not query:
            return False
        if not self._begin(f"search {query!r}"):
            return False

        try:
            location = self._geocode(query)
            self._load_weather(location)
        except LocationLookupError as exc:
            self._fail(exc)
            return False

        self._succeed(location)
        return True

    def locate(self, geolocation) -> bool:
        """Look up conditions at the device's position (any object with ``get_current_position()``)."""
        if not self._begin("device location"):
            return False

        try:
            location = self._device_position(geolocation)
            self._load_weather(location)
        except LocationLookupError as exc:
            self._fail(exc)
            return False

        self._succeed(location)
        return True

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def _begin(self, what: str) -> bool:
        if self.busy:
            logger.warning("Ignoring %s: a lookup is already in progress", what)
            return False
        logger.info("Starting lookup: %s", what)
        self.busy = True
        self.error = None
        self.status = LookupStatus.LOADING
        return True

    def _fail(self, exc: LocationLookupError) -> None:
        self.error = exc
        self.status = exc.status
        self.busy = False

    def _succeed(self, location: ResolvedLocation) -> None:
        self.location = location
        self.status = LookupStatus.SUCCESS
        self.busy = False
        logger.info("Loaded conditions for %s", location.display_name or "current location")

    # ------------------------------------------------------------------
    # Collaborator calls
    # ------------------------------------------------------------------
    def _geocode(self, query: str) -> ResolvedLocation:
        try:
            matches = self.geocoder.search(query, limit=1)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Geocoding failed for %r: %s", query, exc)
            raise ServiceUnavailable() from exc

        if not matches:
            raise NotFound(query)

        match = matches[0]
        try:
            return ResolvedLocation(
                latitude=float(match["lat"]),
                longitude=float(match["lon"]),
                display_name=match.get("display_name", query),
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Malformed geocoding match for %r: %s", query, exc)
            raise ServiceUnavailable() from exc

    @staticmethod
    def _device_position(geolocation) -> ResolvedLocation:
        try:
            lat, lon = geolocation.get_current_position()
        except GeolocationError as exc:
            logger.warning("Device geolocation failed: %s", exc)
            if exc.permission_denied:
                raise PermissionDenied() from exc
            raise GenericLocationError() from exc
        return ResolvedLocation(latitude=lat, longitude=lon)

    def _load_weather(self, location: ResolvedLocation) -> None:
        units = self.state.units
        try:
            current = self.weather.get_current_conditions(
                location.latitude,
                location.longitude,
                temperature_unit=units.temperature_unit,
                wind_speed_unit=units.wind_speed_unit,
            )
            temperature = float(current["temperature"])
            humidity = float(current["humidity"])
            wind_speed = float(current["wind_speed"])
        except (requests.RequestException, KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "Weather fetch failed for %s,%s: %s",
                location.latitude,
                location.longitude,
                exc,
            )
            raise FetchFailed() from exc

        # Values arrived in the units we asked for
        self.state.set_temperature(temperature, units)
        self.state.set_humidity(humidity)
        self.state.set_wind(wind_speed, units)
        self.state.location_name = location.display_name
