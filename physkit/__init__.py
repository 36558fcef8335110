"""
physkit - closed-form formulas for classical mechanics and thermodynamics.

Every public entry point is a pure function: numbers in, numbers out,
validated on each call. Subpackages:

    core            constants, types, exceptions, unit conversion
    mathematics     angles, number sets, combinatorics, statistics, roots
    mechanics       kinematics, statics, dynamics
    thermodynamics  first law, ideal gas, state variables, systems
    utils           colour spaces, logging setup
"""

import logging

from .core.types import (
    CalculationError,
    DomainError,
    MissingArgumentError,
    SequenceLengthError,
    UndefinedResultError,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "CalculationError",
    "DomainError",
    "MissingArgumentError",
    "SequenceLengthError",
    "UndefinedResultError",
]
