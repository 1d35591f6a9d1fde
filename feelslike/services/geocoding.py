import logging
from typing import Dict, List

import requests

from ..config import NOMINATIM_URL, USER_AGENT, HTTP_TIMEOUT

logger = logging.getLogger(__name__)


class NominatimService:
    """Resolve free text → coordinates with OpenStreetMap's Nominatim."""

    def __init__(self, url: str = NOMINATIM_URL, timeout: float = HTTP_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def search(self, query: str, limit: int = 1) -> List[Dict[str, str]]:
        """
        Returns the best matches, each with ``lat`` and ``lon`` as decimal
        strings plus a ``display_name``. An empty list means no match.
        """
        params = {"format": "json", "q": query, "limit": limit}
        logger.debug("Geocoding %r", query)
        resp = requests.get(self.url, params=params, headers=USER_AGENT, timeout=self.timeout)
        resp.raise_for_status()
        results = resp.json()
        if not isinstance(results, list):
            raise ValueError("Unexpected geocoding response.")
        return results
