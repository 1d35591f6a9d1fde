from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .utils.units import c_to_f, f_to_c, mph_to_kph, kph_to_mph
from .utils.heat_index import shade_feels_like_f, sun_feels_like_f


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"

    @property
    def temperature_unit(self) -> str:
        """Open‑Meteo `temperature_unit` for this system's native side."""
        return "fahrenheit" if self is UnitSystem.IMPERIAL else "celsius"

    @property
    def wind_speed_unit(self) -> str:
        """Open‑Meteo `wind_speed_unit` for this system's native side."""
        return "mph" if self is UnitSystem.IMPERIAL else "kmh"

    @property
    def temperature_label(self) -> str:
        return "°F" if self is UnitSystem.IMPERIAL else "°C"

    @property
    def wind_label(self) -> str:
        return "mph" if self is UnitSystem.IMPERIAL else "km/h"


UnitsLike = Union[UnitSystem, str]


@dataclass(frozen=True)
class Temperature:
    """A temperature held in both scales. Build it with the ``from_*`` helpers."""

    celsius: float
    fahrenheit: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "Temperature":
        return cls(celsius=celsius, fahrenheit=c_to_f(celsius))

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> "Temperature":
        return cls(celsius=f_to_c(fahrenheit), fahrenheit=fahrenheit)

    @classmethod
    def in_units(cls, value: float, units: UnitsLike) -> "Temperature":
        if UnitSystem(units) is UnitSystem.IMPERIAL:
            return cls.from_fahrenheit(value)
        return cls.from_celsius(value)

    def value_in(self, units: UnitsLike) -> float:
        return self.fahrenheit if UnitSystem(units) is UnitSystem.IMPERIAL else self.celsius


@dataclass(frozen=True)
class WindSpeed:
    """A wind speed held in mph and km/h. Build it with the ``from_*`` helpers."""

    mph: float
    kph: float

    @classmethod
    def from_mph(cls, mph: float) -> "WindSpeed":
        return cls(mph=mph, kph=mph_to_kph(mph))

    @classmethod
    def from_kph(cls, kph: float) -> "WindSpeed":
        return cls(mph=kph_to_mph(kph), kph=kph)

    @classmethod
    def in_units(cls, value: float, units: UnitsLike) -> "WindSpeed":
        if UnitSystem(units) is UnitSystem.IMPERIAL:
            return cls.from_mph(value)
        return cls.from_kph(value)

    def value_in(self, units: UnitsLike) -> float:
        return self.mph if UnitSystem(units) is UnitSystem.IMPERIAL else self.kph


DEFAULT_TEMPERATURE_F = 75.0
DEFAULT_HUMIDITY = 60.0
DEFAULT_WIND_MPH = 5.0


class WeatherState:
    """
    Current conditions for one session, readable in either unit system.

    Temperature and wind are only ever replaced as whole pairs, so the two
    scales cannot drift apart. The feels‑like values are properties and are
    recomputed on every read.
    """

    def __init__(
        self,
        temperature: Optional[Temperature] = None,
        humidity: float = DEFAULT_HUMIDITY,
        wind: Optional[WindSpeed] = None,
        units: UnitsLike = UnitSystem.IMPERIAL,
        location_name: Optional[str] = None,
    ):
        self.temperature = temperature or Temperature.from_fahrenheit(DEFAULT_TEMPERATURE_F)
        self.humidity = humidity
        self.wind = wind or WindSpeed.from_mph(DEFAULT_WIND_MPH)
        self.units = UnitSystem(units)
        self.location_name = location_name

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def set_temperature(self, value: float, units: Optional[UnitsLike] = None) -> None:
        self.temperature = Temperature.in_units(value, units or self.units)

    def set_wind(self, value: float, units: Optional[UnitsLike] = None) -> None:
        self.wind = WindSpeed.in_units(value, units or self.units)

    def set_humidity(self, value: float) -> None:
        self.humidity = value

    def set_unit_system(self, units: UnitsLike) -> None:
        """Switch the active system. Stored values are left as they are."""
        self.units = UnitSystem(units)

    # ------------------------------------------------------------------
    # Views in the active unit system
    # ------------------------------------------------------------------
    @property
    def air_temperature(self) -> float:
        return self.temperature.value_in(self.units)

    @property
    def wind_speed(self) -> float:
        return self.wind.value_in(self.units)

    @property
    def feels_like_shade_f(self) -> float:
        return shade_feels_like_f(self.temperature.fahrenheit, self.humidity, self.wind.mph)

    @property
    def feels_like_sun_f(self) -> float:
        return sun_feels_like_f(self.temperature.fahrenheit, self.humidity, self.wind.mph)

    @property
    def feels_like_shade(self) -> float:
        return Temperature.from_fahrenheit(self.feels_like_shade_f).value_in(self.units)

    @property
    def feels_like_sun(self) -> float:
        return Temperature.from_fahrenheit(self.feels_like_sun_f).value_in(self.units)

    # ------------------------------------------------------------------
    # Session (de)serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "temperature": {
                "celsius": self.temperature.celsius,
                "fahrenheit": self.temperature.fahrenheit,
            },
            "humidity": self.humidity,
            "wind": {"mph": self.wind.mph, "kph": self.wind.kph},
            "units": self.units.value,
            "location_name": self.location_name,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "WeatherState":
        """Rebuild a state saved with :meth:`to_dict`; empty data gives the defaults."""
        if not data:
            return cls()
        return cls(
            temperature=Temperature(**data["temperature"]),
            humidity=data["humidity"],
            wind=WindSpeed(**data["wind"]),
            units=data["units"],
            location_name=data.get("location_name"),
        )

    def summary(self) -> dict:
        """Everything the presentation layer reads, in the active units."""
        return {
            "units": self.units.value,
            "temperature_label": self.units.temperature_label,
            "wind_label": self.units.wind_label,
            "air_temperature": self.air_temperature,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
            "feels_like_shade": self.feels_like_shade,
            "feels_like_sun": self.feels_like_sun,
            "location_name": self.location_name,
        }
