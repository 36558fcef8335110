"""
Value types, enumerations and exceptions shared by all formula modules.

Vectors are plain named tuples: they carry components and nothing else.
Every formula that needs vector arithmetic works on the components
directly, so callers may pass ordinary tuples wherever a vector is
expected.
"""

from enum import Enum
from typing import NamedTuple


# =============================================================================
# Vector Types
# =============================================================================

class Vec2(NamedTuple):
    """2D coordinate group (x, y)."""
    x: float
    y: float


class Vec3(NamedTuple):
    """3D coordinate group (x, y, z)."""
    x: float
    y: float
    z: float


# =============================================================================
# Beam Statics Types
# =============================================================================

class Reactions(NamedTuple):
    """
    Support reactions of a two-support beam.

    Attributes:
        reaction_a: Reaction at support A (positive upward)
        reaction_b: Reaction at support B (positive upward)
    """
    reaction_a: float
    reaction_b: float


class PointLoad(NamedTuple):
    """Concentrated load (positive downward) at an x-position."""
    force: float
    position: float


class UniformLoad(NamedTuple):
    """
    Uniform distributed load (UDL) segment.

    Attributes:
        intensity: Load per unit length q (positive downward), e.g. N/m
        start: x where the segment begins
        end: x where the segment ends (end >= start)
    """
    intensity: float
    start: float
    end: float


# =============================================================================
# Color Types
# =============================================================================

class Color(NamedTuple):
    """8-bit RGBA color. Channels are integers in [0, 255]."""
    r: int
    g: int
    b: int
    a: int = 255

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class HSV(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""
    hue: float
    saturation: float
    value: float


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""
    hue: float
    saturation: float
    lightness: float


# =============================================================================
# Enumerations
# =============================================================================

class TemperatureUnit(Enum):
    """Temperature scales understood by the unit conversions."""
    KELVIN = "K"
    CELSIUS = "°C"
    FAHRENHEIT = "°F"


class PressureUnit(Enum):
    """Pressure units understood by the unit conversions."""
    PASCAL = "Pa"
    BAR = "bar"
    ATMOSPHERE = "atm"
    MILLIMETER_OF_MERCURY = "mmHg"


class SystemType(Enum):
    """
    Thermodynamic system classification by boundary permeability.

    - OPEN: exchanges mass and energy with the surroundings
    - CLOSED: exchanges energy (heat, work) but not mass
    - ISOLATED: exchanges neither mass nor energy
    """
    OPEN = "open"
    CLOSED = "closed"
    ISOLATED = "isolated"


class ProcessType(Enum):
    """Idealized thermodynamic processes."""
    ISOTHERMAL = "isothermal"  # T = const
    ISOBARIC = "isobaric"      # p = const
    ISOCHORIC = "isochoric"    # V = const
    ADIABATIC = "adiabatic"    # Q = 0


# =============================================================================
# Exceptions
# =============================================================================

class CalculationError(ValueError):
    """
    Base exception for formulas that cannot be evaluated.

    Attributes:
        parameter: Name of the offending argument, if known
    """

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        if parameter:
            message = f"{message} (parameter '{parameter}')"
        super().__init__(message)


class MissingArgumentError(CalculationError, TypeError):
    """Raised when a required input is None."""
    pass


class SequenceLengthError(CalculationError):
    """Raised for empty sequences or paired sequences of unequal length."""
    pass


class DomainError(CalculationError):
    """Raised when a numeric argument lies outside its valid domain."""
    pass


class UndefinedResultError(CalculationError):
    """
    Raised when the requested quantity is mathematically undefined.

    Examples:
        - Square root of a negative discriminant
        - Zero total weight for a center of gravity
        - Position coincident with the rotation center
    """
    pass
