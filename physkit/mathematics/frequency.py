"""
Frequency-based statistics: modes, percentiles and quantiles.
"""

from typing import Any, Hashable, Iterable, List

import numpy as np

from ..core.validation import as_float_array, require_in_range, require_non_empty


def _counts(items: List[Hashable]) -> dict:
    counts: dict = {}
    for item in items:
        counts[item] = counts.get(item, 0) + 1
    return counts


def mode(values: Iterable[Hashable]) -> Any:
    """
    Most frequent value.

    Ties go to the value that reached the highest count first while
    scanning in input order.

    Raises:
        SequenceLengthError: If values is empty
    """
    items = require_non_empty(values, "values")
    counts: dict = {}
    best = items[0]
    best_count = 0
    for item in items:
        counts[item] = counts.get(item, 0) + 1
        if counts[item] > best_count:
            best_count = counts[item]
            best = item
    return best


def modes(values: Iterable[Hashable]) -> List[Any]:
    """All values sharing the highest count, in order of first appearance."""
    items = require_non_empty(values, "values")
    counts = _counts(items)
    highest = max(counts.values())
    # dicts preserve insertion order, i.e. first appearance
    return [item for item, count in counts.items() if count == highest]


def percentile(values: Iterable[float], percent: float) -> float:
    """
    Percentile with inclusive linear interpolation.

    The rank is p/100 * (n - 1) on the sorted data; fractional ranks
    interpolate between neighbours (same as Excel PERCENTILE.INC).

    Args:
        values: Data values
        percent: Percentile in [0, 100]

    Returns:
        Interpolated value
    """
    data = as_float_array(values, "values")
    require_in_range(percent, 0.0, 100.0, "percent")
    if data.size == 1:
        return float(data[0])
    return float(np.percentile(data, percent, method="linear"))


def quantile(values: Iterable[float], q: float) -> float:
    """Quantile for q in [0, 1]; equivalent to percentile(values, 100 q)."""
    require_in_range(q, 0.0, 1.0, "q", label="Quantile")
    return percentile(values, q * 100.0)
