"""Tests for the shade/sun feels-like model."""
import math

import pytest

from feelslike.utils.heat_index import (
    SOLAR_LOAD_F,
    rothfusz_heat_index,
    shade_feels_like_f,
    simple_heat_index,
    sun_feels_like_f,
)


def regression(T, R):
    return (
        -42.379 + 2.04901523 * T + 10.14333127 * R - 0.22475541 * T * R
        - 0.00683783 * T ** 2 - 0.05481717 * R ** 2 + 0.00122874 * T ** 2 * R
        + 0.00085282 * T * R ** 2 - 0.00000199 * T ** 2 * R ** 2
    )


def test_below_80_is_wind_chill_only():
    assert shade_feels_like_f(79.9, 0, 10) == pytest.approx(79.9 - 2.5)
    assert shade_feels_like_f(60, 95, 0) == 60


def test_80_uses_heat_index_branch():
    # Simplified index at 80°F/0% is 77.7, below 80, so no regression
    assert shade_feels_like_f(80.0, 0, 10) == pytest.approx(77.7 - 2.0)


def test_discontinuity_at_threshold_is_kept():
    below = shade_feels_like_f(79.999, 0, 20)
    at = shade_feels_like_f(80.0, 0, 20)
    assert below == pytest.approx(74.999)
    assert at == pytest.approx(73.7)


def test_hot_day_uses_full_regression():
    assert simple_heat_index(90, 50) == pytest.approx(91.05)
    assert shade_feels_like_f(90, 50, 0) == pytest.approx(regression(90, 50))


def test_wind_cooling_above_threshold():
    assert shade_feels_like_f(90, 50, 10) == pytest.approx(regression(90, 50) - 2.0)


def test_low_humidity_adjustment():
    T, R = 100, 10
    adjustment = ((13 - R) / 4) * math.sqrt((17 - abs(T - 95)) / 17)
    assert rothfusz_heat_index(T, R) == pytest.approx(regression(T, R) - adjustment)


def test_low_humidity_adjustment_not_applied_above_112():
    assert rothfusz_heat_index(115, 10) == pytest.approx(regression(115, 10))


def test_high_humidity_adjustment():
    T, R = 85, 90
    adjustment = ((R - 85) / 10) * ((87 - T) / 5)
    assert rothfusz_heat_index(T, R) == pytest.approx(regression(T, R) + adjustment)


def test_high_humidity_adjustment_not_applied_above_87():
    assert rothfusz_heat_index(88, 90) == pytest.approx(regression(88, 90))


@pytest.mark.parametrize("temp_f,humidity,wind", [(50, 40, 3), (79.9, 10, 0), (80, 60, 12), (104, 5, 7)])
def test_sun_is_shade_plus_solar_load(temp_f, humidity, wind):
    shade = shade_feels_like_f(temp_f, humidity, wind)
    assert sun_feels_like_f(temp_f, humidity, wind) == pytest.approx(shade + SOLAR_LOAD_F)


def test_nan_propagates():
    assert math.isnan(shade_feels_like_f(float("nan"), 50, 5))
    assert math.isnan(shade_feels_like_f(90, float("nan"), 5))
    assert math.isnan(sun_feels_like_f(70, 50, float("nan")))
