import logging

import requests

from ..config import OPEN_METEO_URL, USER_AGENT, HTTP_TIMEOUT

logger = logging.getLogger(__name__)


class OpenMeteoService:
    """Wraps the Open‑Meteo forecast API (current conditions only)."""

    CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,wind_speed_10m"

    def __init__(self, url: str = OPEN_METEO_URL, timeout: float = HTTP_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def get_current_conditions(
        self,
        lat: float,
        lon: float,
        temperature_unit: str = "fahrenheit",
        wind_speed_unit: str = "mph",
    ) -> dict:
        """
        Returns a dictionary with:
        - temperature (in ``temperature_unit``)
        - humidity (relative, %)
        - wind_speed (in ``wind_speed_unit``)
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": self.CURRENT_FIELDS,
            "temperature_unit": temperature_unit,
            "wind_speed_unit": wind_speed_unit,
        }
        logger.debug("Fetching current conditions for %s,%s", lat, lon)
        resp = requests.get(self.url, params=params, headers=USER_AGENT, timeout=self.timeout)
        resp.raise_for_status()

        body = resp.json()
        current = body.get("current") if isinstance(body, dict) else None
        if not isinstance(current, dict):
            raise ValueError("Weather response has no current conditions.")

        conditions = {
            "temperature": current.get("temperature_2m"),
            "humidity": current.get("relative_humidity_2m"),
            "wind_speed": current.get("wind_speed_10m"),
        }
        missing = [name for name, value in conditions.items() if not _is_number(value)]
        if missing:
            raise ValueError(f"Weather response has no usable {', '.join(missing)}.")
        return conditions


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
