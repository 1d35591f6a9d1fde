"""Shared fixtures: in-memory collaborators and a Flask test client."""
from unittest.mock import MagicMock

import pytest
import requests

from feelslike.services.geocoding import NominatimService
from feelslike.services.open_meteo import OpenMeteoService
from feelslike.services.resolver import LocationResolver
from feelslike.state import WeatherState

PHOENIX = {"lat": "33.4484", "lon": "-112.0740", "display_name": "Phoenix, Maricopa County, Arizona"}


@pytest.fixture
def phoenix():
    return dict(PHOENIX)


@pytest.fixture
def state():
    return WeatherState()


@pytest.fixture
def geocoder():
    mock = MagicMock(spec=NominatimService)
    mock.search.return_value = [PHOENIX]
    return mock


@pytest.fixture
def weather():
    mock = MagicMock(spec=OpenMeteoService)
    mock.get_current_conditions.return_value = {
        "temperature": 95.0,
        "humidity": 20.0,
        "wind_speed": 10.0,
    }
    return mock


@pytest.fixture
def resolver(state, geocoder, weather):
    return LocationResolver(state, geocoder=geocoder, weather=weather)


@pytest.fixture
def mock_response():
    """Factory for objects that look like a `requests.Response`."""
    def _make(json_data=None, status_code=200):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data
        if status_code >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
        else:
            resp.raise_for_status.return_value = None
        return resp
    return _make


@pytest.fixture
def client():
    from app import app

    app.config.update(TESTING=True, SECRET_KEY="test-secret")
    with app.test_client() as test_client:
        yield test_client
