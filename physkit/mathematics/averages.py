"""
Means of numeric sequences.

All functions accept any iterable whose elements convert to float
(int, Decimal, Fraction, numpy scalars, ...).
"""

from typing import Iterable

import numpy as np

from ..core.types import DomainError, SequenceLengthError
from ..core.validation import as_float_array, require_present, require_same_length


def _values(values: Iterable[float], name: str = "values") -> np.ndarray:
    data = as_float_array(values, name, allow_empty=True)
    if data.size == 0:
        raise SequenceLengthError("Cannot compute mean for empty set.", name)
    return data


def arithmetic(values: Iterable[float]) -> float:
    """Arithmetic mean Σx / n."""
    return float(np.mean(_values(values)))


def geometric(values: Iterable[float]) -> float:
    """
    Geometric mean exp(mean(ln x)).

    Raises:
        DomainError: If any value is <= 0
    """
    data = _values(values)
    if np.any(data <= 0.0):
        raise DomainError("All values must be > 0 for geometric mean.", "values")
    return float(np.exp(np.mean(np.log(data))))


def harmonic(values: Iterable[float]) -> float:
    """Harmonic mean n / Σ(1/x). Zero elements are rejected."""
    data = _values(values)
    if np.any(data == 0.0):
        raise DomainError("Values must be non-zero for harmonic mean.", "values")
    return float(data.size / np.sum(1.0 / data))


def quadratic(values: Iterable[float]) -> float:
    """Root mean square sqrt(Σx² / n)."""
    data = _values(values)
    return float(np.sqrt(np.mean(data * data)))


def weighted_arithmetic(values: Iterable[float], weights: Iterable[float]) -> float:
    """
    Weighted mean Σ(w·x) / Σw.

    Args:
        values: Data values
        weights: One weight per value; may be of any sign

    Raises:
        MissingArgumentError: If either sequence is None
        SequenceLengthError: If empty or lengths differ
        DomainError: If the weights sum to zero
    """
    require_present(values, "values")
    require_present(weights, "weights")
    data = _values(values)
    w = as_float_array(weights, "weights", allow_empty=True)
    require_same_length(data, w, "values", "weights")

    total_weight = float(np.sum(w))
    if total_weight == 0.0:
        raise DomainError("Sum of weights must not be 0.", "weights")
    return float(np.sum(data * w) / total_weight)
