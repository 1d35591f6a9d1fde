KPH_PER_MPH = 1.60934


def c_to_f(celsius: float) -> float:
    """Convert Celsius → Fahrenheit."""
    return celsius * 9 / 5 + 32


def f_to_c(fahrenheit: float) -> float:
    """Convert Fahrenheit → Celsius."""
    return (fahrenheit - 32) * 5 / 9


def mph_to_kph(mph: float) -> float:
    return mph * KPH_PER_MPH


def kph_to_mph(kph: float) -> float:
    return kph / KPH_PER_MPH
