"""
utils package – small, pure‑function helpers.

We expose the unit conversions and the feels‑like model that are used
throughout the app.
"""

# Re‑export the helpers for a clean import path
from .units import c_to_f, f_to_c, mph_to_kph, kph_to_mph   # noqa: F401
from .heat_index import shade_feels_like_f, sun_feels_like_f  # noqa: F401

__all__ = [
    "c_to_f",
    "f_to_c",
    "mph_to_kph",
    "kph_to_mph",
    "shade_feels_like_f",
    "sun_feels_like_f",
]
