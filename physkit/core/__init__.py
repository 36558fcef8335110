"""Core definitions shared by every formula module."""

from .constants import (
    G0,
    GAS_CONSTANT,
    K_BOLTZMANN,
    N_AVOGADRO,
    P_ATM,
    P_BAR,
    P_MMHG,
    ABSOLUTE_ZERO_CELSIUS,
    DEFAULT_TOLERANCE,
)
from .types import (
    Vec2,
    Vec3,
    Reactions,
    PointLoad,
    UniformLoad,
    Color,
    HSV,
    HSL,
    TemperatureUnit,
    PressureUnit,
    SystemType,
    ProcessType,
    CalculationError,
    MissingArgumentError,
    SequenceLengthError,
    DomainError,
    UndefinedResultError,
)
from .units import (
    to_kelvin,
    to_celsius,
    to_fahrenheit,
    to_pascal,
    to_bar,
    to_atmosphere,
    to_millimeter_of_mercury,
    kelvin_to_celsius,
    celsius_to_kelvin,
)

__all__ = [
    # Constants
    "G0",
    "GAS_CONSTANT",
    "K_BOLTZMANN",
    "N_AVOGADRO",
    "P_ATM",
    "P_BAR",
    "P_MMHG",
    "ABSOLUTE_ZERO_CELSIUS",
    "DEFAULT_TOLERANCE",
    # Types
    "Vec2",
    "Vec3",
    "Reactions",
    "PointLoad",
    "UniformLoad",
    "Color",
    "HSV",
    "HSL",
    "TemperatureUnit",
    "PressureUnit",
    "SystemType",
    "ProcessType",
    # Exceptions
    "CalculationError",
    "MissingArgumentError",
    "SequenceLengthError",
    "DomainError",
    "UndefinedResultError",
    # Units
    "to_kelvin",
    "to_celsius",
    "to_fahrenheit",
    "to_pascal",
    "to_bar",
    "to_atmosphere",
    "to_millimeter_of_mercury",
    "kelvin_to_celsius",
    "celsius_to_kelvin",
]
