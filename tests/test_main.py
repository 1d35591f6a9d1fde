"""Tests for the command-line driver."""
from unittest.mock import patch

import pytest

from feelslike import main as cli
from feelslike.config import Colours
from feelslike.services.resolver import LocationResolver


@pytest.fixture
def wired(geocoder, weather):
    """Make the CLI build its resolver around the fake collaborators."""
    def build(state):
        return LocationResolver(state, geocoder=geocoder, weather=weather)

    with patch.object(cli, "LocationResolver", side_effect=build):
        yield geocoder, weather


def answers(*values):
    it = iter(values)
    return lambda prompt="": next(it)


def test_reports_feels_like(monkeypatch, capsys, wired):
    monkeypatch.setattr("builtins.input", answers("", "Phoenix"))

    cli.main()

    out = capsys.readouterr().out
    assert "Phoenix, Maricopa County, Arizona" in out
    assert "Air: 95.0°F" in out
    assert "in the shade" in out and "in the sun" in out


def test_metric_requests_metric_units(monkeypatch, capsys, wired):
    _, weather = wired
    weather.get_current_conditions.return_value = {
        "temperature": 35.0,
        "humidity": 20.0,
        "wind_speed": 16.0,
    }
    monkeypatch.setattr("builtins.input", answers("metric", "Phoenix"))

    cli.main()

    _, kwargs = weather.get_current_conditions.call_args
    assert kwargs["temperature_unit"] == "celsius"
    assert "Air: 35.0°C" in capsys.readouterr().out


def test_lookup_error_exits(monkeypatch, wired):
    geocoder, _ = wired
    geocoder.search.return_value = []
    monkeypatch.setattr("builtins.input", answers("imperial", "Atlantis"))

    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert "Could not find location" in str(excinfo.value.code)


def test_unknown_units_exit(monkeypatch):
    monkeypatch.setattr("builtins.input", answers("kelvin"))
    with pytest.raises(SystemExit):
        cli.main()


def test_colourize():
    assert cli.colourize(90, "°F", 80).startswith(Colours.RED)
    assert cli.colourize(70, "°F", 80).startswith(Colours.CYAN)
    assert cli.colourize(80, "°F", 80) == f"{Colours.GREEN}80.0°F{Colours.RESET}"
