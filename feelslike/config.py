import os

NOMINATIM_URL = os.environ.get(
    "FEELSLIKE_NOMINATIM_URL", "https://nominatim.openstreetmap.org/search"
)
OPEN_METEO_URL = os.environ.get(
    "FEELSLIKE_OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast"
)

# Nominatim's usage policy requires an identifying User‑Agent
USER_AGENT = {"User-Agent": os.environ.get("FEELSLIKE_USER_AGENT", "feelslike-client/1.0")}

# Seconds; applies to every outbound request
HTTP_TIMEOUT = float(os.environ.get("FEELSLIKE_HTTP_TIMEOUT", "10"))

SECRET_KEY = os.environ.get("FEELSLIKE_SECRET_KEY") or os.urandom(24)

LOG_LEVEL = os.environ.get("FEELSLIKE_LOG_LEVEL", "INFO").upper()


class Colours:
    """ANSI escape codes used by the command‑line driver."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    RESET = "\033[0m"
