import logging
import sys

from .config import Colours, LOG_LEVEL
from .services.resolver import LocationResolver
from .state import UnitSystem, WeatherState


def colourize(value: float, label: str, reference: float) -> str:
    """Wrap a feels‑like temperature in red/cyan depending on how it compares to the air."""
    if value > reference:
        colour = Colours.RED
    elif value < reference:
        colour = Colours.CYAN
    else:
        colour = Colours.GREEN
    return f"{colour}{value:.1f}{label}{Colours.RESET}"


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # ------------------------------------------------------------------
    # 1️⃣ Units and location
    # ------------------------------------------------------------------
    answer = input("Units – imperial or metric? [imperial]: ").strip().lower()
    try:
        units = UnitSystem(answer or UnitSystem.IMPERIAL.value)
    except ValueError:
        sys.exit(f"Unknown unit system '{answer}'.")

    state = WeatherState(units=units)
    query = input("Enter a place (e.g. 'Phoenix, AZ'): ").strip()
    if not query:
        sys.exit("No location given.")

    # ------------------------------------------------------------------
    # 2️⃣ Geocode and pull current conditions
    # ------------------------------------------------------------------
    resolver = LocationResolver(state)
    if not resolver.search(query):
        sys.exit(resolver.error_message)

    # ------------------------------------------------------------------
    # 3️⃣ Report
    # ------------------------------------------------------------------
    t_label = units.temperature_label
    print(f"\n{state.location_name}")
    print(
        f"\tAir: {state.air_temperature:.1f}{t_label}, "
        f"Humidity: {state.humidity:.0f}%, "
        f"Wind: {state.wind_speed:.1f} {units.wind_label}"
    )
    print(
        f"\tFeels like {colourize(state.feels_like_shade, t_label, state.air_temperature)} in the shade "
        f"and {colourize(state.feels_like_sun, t_label, state.air_temperature)} in the sun."
    )


if __name__ == "__main__":
    main()
