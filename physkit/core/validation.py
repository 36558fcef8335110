"""
Argument validation shared by all formula modules.

Every check raises on the first violated constraint; nothing is collected
or deferred. Sequence helpers convert their input to float64 numpy arrays
so the results can be handed straight to the Numba kernels.
"""

import math
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from .types import (
    DomainError,
    MissingArgumentError,
    SequenceLengthError,
)


def _label(name: str, label: str | None) -> str:
    """Human-readable noun for messages ("specific_volume" -> "Specific volume")."""
    if label:
        return label
    return name.replace("_", " ").capitalize()


# =============================================================================
# Scalar Checks
# =============================================================================

def require_present(value: Any, name: str) -> Any:
    """Reject None."""
    if value is None:
        raise MissingArgumentError("Value must not be None.", name)
    return value


def require_positive(value: float, name: str, label: str | None = None) -> float:
    """Require value > 0."""
    if value <= 0:
        raise DomainError(f"{_label(name, label)} must be greater than zero.", name)
    return value


def require_non_negative(value: float, name: str, label: str | None = None) -> float:
    """Require value >= 0."""
    if value < 0:
        raise DomainError(f"{_label(name, label)} must be non-negative.", name)
    return value


def require_non_zero(value: float, name: str, label: str | None = None) -> float:
    """Require value != 0 (value is used as a divisor)."""
    if value == 0:
        raise DomainError(f"{_label(name, label)} must be non-zero.", name)
    return value


def require_finite(value: float, name: str, label: str | None = None) -> float:
    """Reject NaN and infinities."""
    if not math.isfinite(value):
        raise DomainError(f"{_label(name, label)} must be a finite number.", name)
    return value


def require_in_range(
    value: float,
    low: float,
    high: float,
    name: str,
    label: str | None = None
) -> float:
    """Require low <= value <= high."""
    if value < low or value > high:
        raise DomainError(
            f"{_label(name, label)} must be between {low:g} and {high:g}.", name
        )
    return value


def require_tolerance(tolerance: float, allow_zero: bool = False) -> float:
    """
    Validate a comparison tolerance.

    Args:
        tolerance: Absolute tolerance
        allow_zero: Accept tolerance == 0 (exact comparison)

    Returns:
        The tolerance unchanged
    """
    if not math.isfinite(tolerance):
        raise DomainError("Tolerance must be a finite number.", "tolerance")
    if allow_zero:
        if tolerance < 0.0:
            raise DomainError("Tolerance must be non-negative.", "tolerance")
    elif tolerance <= 0.0:
        raise DomainError("Tolerance must be greater than zero.", "tolerance")
    return tolerance


# =============================================================================
# Sequence Checks
# =============================================================================

def require_non_empty(values: Iterable[Any] | None, name: str) -> list:
    """Materialize values into a list and require at least one element."""
    require_present(values, name)
    items = list(values)
    if not items:
        raise SequenceLengthError("Sequence must not be empty.", name)
    return items


def as_float_array(
    values: Iterable[float] | None,
    name: str,
    allow_empty: bool = False
) -> NDArray[np.float64]:
    """
    Convert a sequence of numbers to a 1D float64 array.

    Elements may be of any type convertible to float (int, Decimal,
    Fraction, numpy scalars, ...).

    Args:
        values: Input sequence
        name: Parameter name used in error messages
        allow_empty: Accept a zero-length sequence

    Returns:
        1D float64 array
    """
    require_present(values, name)
    if not isinstance(values, (np.ndarray, list, tuple)):
        values = list(values)
    try:
        data = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DomainError("Sequence must contain only numeric values.", name) from exc

    if data.ndim != 1:
        raise SequenceLengthError("Expected a one-dimensional sequence of numbers.", name)
    if data.size == 0 and not allow_empty:
        raise SequenceLengthError("Sequence must not be empty.", name)
    return data


def as_vector_array(
    values: Iterable[Iterable[float]] | None,
    dim: int,
    name: str,
    allow_empty: bool = False
) -> NDArray[np.float64]:
    """
    Convert a sequence of 2D/3D tuples to an (n, dim) float64 array.

    Args:
        values: Sequence of coordinate tuples
        dim: Number of components per vector (2 or 3)
        name: Parameter name used in error messages
        allow_empty: Accept a zero-length sequence

    Returns:
        Array with shape (n, dim)
    """
    require_present(values, name)
    items = list(values)
    if not items:
        if not allow_empty:
            raise SequenceLengthError("Sequence must not be empty.", name)
        return np.empty((0, dim), dtype=np.float64)

    try:
        data = np.asarray(items, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise SequenceLengthError(
            f"Every element must be a {dim}-component vector.", name
        ) from exc

    if data.ndim != 2 or data.shape[1] != dim:
        raise SequenceLengthError(f"Every element must be a {dim}-component vector.", name)
    return data


def as_vector(value: Iterable[float] | None, dim: int, name: str) -> tuple[float, ...]:
    """Convert a single 2D/3D vector to a tuple of floats."""
    require_present(value, name)
    components = tuple(float(c) for c in value)
    if len(components) != dim:
        raise SequenceLengthError(f"Vector must have exactly {dim} components.", name)
    return components


def require_same_length(
    first: Any,
    second: Any,
    first_name: str,
    second_name: str
) -> None:
    """Require two already-validated sequences to pair up element by element."""
    if len(first) != len(second):
        raise SequenceLengthError(
            f"{_label(first_name, None)} and {second_name.replace('_', ' ')} "
            f"must have the same length ({len(first)} != {len(second)}).",
            first_name
        )
