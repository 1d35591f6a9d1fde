"""
Perceived ("feels like") temperature in shade and in direct sun.

Everything here works in °F and mph: the Steadman and Rothfusz constants
are fitted to Fahrenheit and must not be fed Celsius. Callers convert at
the boundary.
"""
import math

HEAT_INDEX_THRESHOLD_F = 80.0
SOLAR_LOAD_F = 15.0


def simple_heat_index(temp_f: float, humidity: float) -> float:
    """Steadman's simplified heat index."""
    return 0.5 * (temp_f + 61.0 + (temp_f - 68.0) * 1.2 + humidity * 0.094)


def rothfusz_heat_index(temp_f: float, humidity: float) -> float:
    """NWS Rothfusz regression, including the low/high humidity adjustments."""
    T, R = temp_f, humidity
    hi = (
        -42.379
        + 2.04901523 * T
        + 10.14333127 * R
        - 0.22475541 * T * R
        - 6.83783e-3 * T * T
        - 5.481717e-2 * R * R
        + 1.22874e-3 * T * T * R
        + 8.5282e-4 * T * R * R
        - 1.99e-6 * T * T * R * R
    )

    if R < 13 and 80 <= T <= 112:
        hi -= ((13 - R) / 4) * math.sqrt((17 - abs(T - 95)) / 17)
    if R > 85 and 80 <= T <= 87:
        hi += ((R - 85) / 10) * ((87 - T) / 5)
    return hi


def shade_feels_like_f(temp_f: float, humidity: float, wind_mph: float) -> float:
    """
    Feels-like temperature in the shade (°F).

    Below 80 °F the heat index is not meaningful, so only a light wind
    chill (wind/4) is applied. From 80 °F up the simplified index is
    computed, upgraded to the full regression once it reaches 80, and a
    wind cooling term (wind/5) is subtracted.
    """
    if temp_f < HEAT_INDEX_THRESHOLD_F:
        return temp_f - wind_mph / 4

    hi = simple_heat_index(temp_f, humidity)
    if hi >= HEAT_INDEX_THRESHOLD_F:
        hi = rothfusz_heat_index(temp_f, humidity)

    return hi - wind_mph / 5


def sun_feels_like_f(temp_f: float, humidity: float, wind_mph: float) -> float:
    """Feels-like temperature in direct sunlight (°F): shade plus a flat solar load."""
    return shade_feels_like_f(temp_f, humidity, wind_mph) + SOLAR_LOAD_F
