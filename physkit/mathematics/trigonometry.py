"""Reciprocal trigonometric functions."""

import math

from ..core.types import UndefinedResultError


def cot(x: float) -> float:
    """
    Cotangent cos(x) / sin(x).

    Raises:
        UndefinedResultError: If sin(x) is exactly zero
    """
    s = math.sin(x)
    if s == 0.0:
        raise UndefinedResultError("Cotangent is undefined where sin(x) = 0.", "x")
    return math.cos(x) / s


def sec(x: float) -> float:
    """Secant 1 / cos(x). Undefined where cos(x) is exactly zero."""
    c = math.cos(x)
    if c == 0.0:
        raise UndefinedResultError("Secant is undefined where cos(x) = 0.", "x")
    return 1.0 / c


def csc(x: float) -> float:
    """Cosecant 1 / sin(x). Undefined where sin(x) is exactly zero."""
    s = math.sin(x)
    if s == 0.0:
        raise UndefinedResultError("Cosecant is undefined where sin(x) = 0.", "x")
    return 1.0 / s
