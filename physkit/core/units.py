"""
Temperature and pressure unit conversion.

Provides:
- Pairwise conversions between Pa, bar, atm and mmHg
- Pairwise conversions between K, °C and °F with absolute-zero checks
- Unit-tagged dispatch (to_kelvin, to_pascal, ...) routed through the
  canonical units (Kelvin for temperature, Pascal for pressure)
"""

from typing import Dict

from .constants import ABSOLUTE_ZERO_CELSIUS, KELVIN_OFFSET, P_ATM, P_BAR, P_MMHG
from .types import DomainError, PressureUnit, TemperatureUnit


# =============================================================================
# Conversion Constants
# =============================================================================

# Pascal per one unit of each pressure scale
PASCAL_PER_UNIT: Dict[PressureUnit, float] = {
    PressureUnit.PASCAL: 1.0,
    PressureUnit.BAR: P_BAR,
    PressureUnit.ATMOSPHERE: P_ATM,
    PressureUnit.MILLIMETER_OF_MERCURY: P_MMHG,
}

# Temperature: °F <-> °C
# T(°F) = T(°C) * 9/5 + 32
F_PER_C = 9.0 / 5.0
C_PER_F = 5.0 / 9.0
F_OFFSET = 32.0


# =============================================================================
# Pressure
# =============================================================================

def bar_to_pascal(pressure_bar: float) -> float:
    return pressure_bar * P_BAR


def pascal_to_bar(pressure_pa: float) -> float:
    return pressure_pa / P_BAR


def atmosphere_to_pascal(pressure_atm: float) -> float:
    return pressure_atm * P_ATM


def pascal_to_atmosphere(pressure_pa: float) -> float:
    return pressure_pa / P_ATM


def atmosphere_to_bar(pressure_atm: float) -> float:
    return pressure_atm * P_ATM / P_BAR


def bar_to_atmosphere(pressure_bar: float) -> float:
    return pressure_bar * P_BAR / P_ATM


def mmhg_to_pascal(pressure_mmhg: float) -> float:
    return pressure_mmhg * P_MMHG


def pascal_to_mmhg(pressure_pa: float) -> float:
    return pressure_pa / P_MMHG


def atmosphere_to_mmhg(pressure_atm: float) -> float:
    return pressure_atm * P_ATM / P_MMHG


def mmhg_to_atmosphere(pressure_mmhg: float) -> float:
    return pressure_mmhg * P_MMHG / P_ATM


def bar_to_mmhg(pressure_bar: float) -> float:
    return pressure_bar * P_BAR / P_MMHG


def mmhg_to_bar(pressure_mmhg: float) -> float:
    return pressure_mmhg * P_MMHG / P_BAR


def _pascal_per_unit(unit: PressureUnit) -> float:
    try:
        return PASCAL_PER_UNIT[unit]
    except (KeyError, TypeError):
        raise DomainError(f"Unknown pressure unit: {unit!r}", "from_unit") from None


def to_pascal(pressure: float, from_unit: PressureUnit) -> float:
    """
    Convert a pressure in any supported unit to Pascal.

    Args:
        pressure: Pressure value in from_unit
        from_unit: Unit tag of the input

    Returns:
        Pressure in Pa
    """
    factor = _pascal_per_unit(from_unit)
    if from_unit is PressureUnit.PASCAL:
        return pressure
    return pressure * factor


def _from_pascal(pressure: float, from_unit: PressureUnit, to_unit: PressureUnit) -> float:
    # Identity conversions return the input untouched
    if from_unit is to_unit:
        _pascal_per_unit(from_unit)
        return pressure
    return to_pascal(pressure, from_unit) / PASCAL_PER_UNIT[to_unit]


def to_bar(pressure: float, from_unit: PressureUnit) -> float:
    """Convert a pressure in any supported unit to bar."""
    return _from_pascal(pressure, from_unit, PressureUnit.BAR)


def to_atmosphere(pressure: float, from_unit: PressureUnit) -> float:
    """Convert a pressure in any supported unit to standard atmospheres."""
    return _from_pascal(pressure, from_unit, PressureUnit.ATMOSPHERE)


def to_millimeter_of_mercury(pressure: float, from_unit: PressureUnit) -> float:
    """Convert a pressure in any supported unit to mmHg."""
    return _from_pascal(pressure, from_unit, PressureUnit.MILLIMETER_OF_MERCURY)


# =============================================================================
# Temperature
# =============================================================================

def kelvin_to_celsius(temperature_k: float) -> float:
    """
    Convert Kelvin to Celsius.

    Raises:
        DomainError: If temperature_k is below absolute zero (< 0 K)
    """
    if temperature_k < 0.0:
        raise DomainError("Temperature in Kelvin cannot be negative.", "temperature_k")
    return temperature_k - KELVIN_OFFSET


def celsius_to_kelvin(temperature_c: float) -> float:
    """
    Convert Celsius to Kelvin.

    Raises:
        DomainError: If temperature_c is below absolute zero (-273.15 °C)
    """
    if temperature_c < ABSOLUTE_ZERO_CELSIUS:
        raise DomainError(
            "Temperature in Celsius cannot be lower than absolute zero (-273.15 °C).",
            "temperature_c"
        )
    return temperature_c + KELVIN_OFFSET


def fahrenheit_to_celsius(temperature_f: float) -> float:
    return (temperature_f - F_OFFSET) * C_PER_F


def celsius_to_fahrenheit(temperature_c: float) -> float:
    if temperature_c < ABSOLUTE_ZERO_CELSIUS:
        raise DomainError(
            "Temperature in Celsius cannot be lower than absolute zero (-273.15 °C).",
            "temperature_c"
        )
    return temperature_c * F_PER_C + F_OFFSET


def fahrenheit_to_kelvin(temperature_f: float) -> float:
    temperature_k = (temperature_f - F_OFFSET) * C_PER_F + KELVIN_OFFSET
    if temperature_k < 0.0:
        raise DomainError("Temperature in Kelvin cannot be negative.", "temperature_f")
    return temperature_k


def kelvin_to_fahrenheit(temperature_k: float) -> float:
    if temperature_k < 0.0:
        raise DomainError("Temperature in Kelvin cannot be negative.", "temperature_k")
    return (temperature_k - KELVIN_OFFSET) * F_PER_C + F_OFFSET


def _unknown_temperature_unit(unit) -> DomainError:
    return DomainError(f"Unknown temperature unit: {unit!r}", "from_unit")


def to_kelvin(temperature: float, from_unit: TemperatureUnit) -> float:
    """Convert a temperature on any supported scale to Kelvin."""
    if from_unit is TemperatureUnit.KELVIN:
        return temperature
    if from_unit is TemperatureUnit.CELSIUS:
        return celsius_to_kelvin(temperature)
    if from_unit is TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_kelvin(temperature)
    raise _unknown_temperature_unit(from_unit)


def to_celsius(temperature: float, from_unit: TemperatureUnit) -> float:
    """Convert a temperature on any supported scale to Celsius."""
    if from_unit is TemperatureUnit.KELVIN:
        return kelvin_to_celsius(temperature)
    if from_unit is TemperatureUnit.CELSIUS:
        return temperature
    if from_unit is TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_celsius(temperature)
    raise _unknown_temperature_unit(from_unit)


def to_fahrenheit(temperature: float, from_unit: TemperatureUnit) -> float:
    """Convert a temperature on any supported scale to Fahrenheit."""
    if from_unit is TemperatureUnit.KELVIN:
        return kelvin_to_fahrenheit(temperature)
    if from_unit is TemperatureUnit.CELSIUS:
        return celsius_to_fahrenheit(temperature)
    if from_unit is TemperatureUnit.FAHRENHEIT:
        return temperature
    raise _unknown_temperature_unit(from_unit)
