"""Membership tests for integers, naturals and open intervals."""

import math

from ..core.constants import INTEGER_EPSILON


def is_integer(x: float, eps: float = INTEGER_EPSILON) -> bool:
    """True if x is finite and within eps of the nearest integer."""
    if not math.isfinite(x):
        return False
    return abs(x - round(x)) <= eps


def is_natural(x: float, include_zero: bool = True, eps: float = INTEGER_EPSILON) -> bool:
    """
    True if x is a natural number.

    Args:
        x: Value to test
        include_zero: Treat 0 as natural (ISO 80000-2 convention)
        eps: Integer tolerance
    """
    if not is_integer(x, eps):
        return False
    return x >= 0 if include_zero else x >= 1


def is_even(n: int) -> bool:
    return abs(n) % 2 == 0


def is_odd(n: int) -> bool:
    return abs(n) % 2 == 1


def is_between(value: float, a: float, b: float) -> bool:
    """Strictly between a and b, bounds in either order. a == b gives False."""
    if a == b:
        return False
    low, high = (a, b) if a < b else (b, a)
    return low < value < high
