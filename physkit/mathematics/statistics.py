"""
Descriptive statistics of numeric sequences.

Variance and standard deviation come in population (divide by n) and
sample (divide by n - 1, Bessel's correction) flavours.
"""

from typing import Iterable

import numpy as np

from ..core.types import SequenceLengthError
from ..core.validation import as_float_array


def minimum(values: Iterable[float]) -> float:
    return float(np.min(as_float_array(values, "values")))


def maximum(values: Iterable[float]) -> float:
    return float(np.max(as_float_array(values, "values")))


def median(values: Iterable[float]) -> float:
    """
    Middle value of the sorted data.

    For an even count the two middle values are averaged:
        median([1, 3, 2]) -> 2
        median([4, 1, 3, 2]) -> 2.5
    """
    return float(np.median(as_float_array(values, "values")))


def variance_population(values: Iterable[float]) -> float:
    """σ² = Σ(x - μ)² / n."""
    return float(np.var(as_float_array(values, "values"), ddof=0))


def variance_sample(values: Iterable[float]) -> float:
    """
    s² = Σ(x - x̄)² / (n - 1).

    Raises:
        SequenceLengthError: If fewer than two values are given
    """
    data = as_float_array(values, "values")
    if data.size < 2:
        raise SequenceLengthError("Sample variance requires at least two values.", "values")
    return float(np.var(data, ddof=1))


def std_dev_population(values: Iterable[float]) -> float:
    return float(np.sqrt(variance_population(values)))


def std_dev_sample(values: Iterable[float]) -> float:
    return float(np.sqrt(variance_sample(values)))
