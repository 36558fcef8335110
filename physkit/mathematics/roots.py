"""
Real n-th roots.

Provides:
- safe_root: real root with strict domain checks (raises)
- root: integer-degree root returning NaN for even roots of negatives
- newton_root / try_newton_root: Newton-Raphson iteration for integer n

Newton-Raphson for y^n = a:
    y_{k+1} = ((n - 1) y_k + a / y_k^(n-1)) / n
"""

import logging
import math

from numba import jit

from ..core.constants import INTEGER_EPSILON, NEWTON_MAX_ITERATIONS, NEWTON_TOLERANCE
from ..core.types import CalculationError, DomainError, UndefinedResultError
from .number_sets import is_integer

logger = logging.getLogger(__name__)


# =============================================================================
# Newton-Raphson Kernel
# =============================================================================

@jit(nopython=True, cache=True)
def _newton_iterate(abs_x: float, n: int, tolerance: float, max_iterations: int):
    """
    Iterate the Newton update for y^n = abs_x.

    Args:
        abs_x: Non-negative radicand
        n: Root degree (n >= 2)
        tolerance: Stop when |y_{k+1} - y_k| <= tolerance
        max_iterations: Iteration cap

    Returns:
        Tuple (estimate, iterations used, converged flag)
    """
    y = max(abs_x, 1.0)
    for i in range(max_iterations):
        y_pow = y ** (n - 1)
        if y_pow == 0.0:
            return 0.0, i + 1, True
        y_next = ((n - 1) * y + abs_x / y_pow) / n
        if abs(y_next - y) <= tolerance:
            return y_next, i + 1, True
        y = y_next
    return y, max_iterations, False


# =============================================================================
# Public API
# =============================================================================

def safe_root(x: float, n: float) -> float:
    """
    Real n-th root with domain checks.

    Negative radicands are accepted only for odd integer degrees:
        safe_root(-8, 3) -> -2

    Args:
        x: Radicand
        n: Root degree, non-zero; must be an odd integer when x < 0

    Raises:
        DomainError: If n == 0, or x < 0 and n is not an integer
        UndefinedResultError: If x < 0 and n is an even integer
    """
    if n == 0:
        raise DomainError("Root degree must be non-zero.", "n")
    if x < 0:
        if not is_integer(n, INTEGER_EPSILON):
            raise DomainError("Root degree must be an integer for a negative radicand.", "n")
        k = int(round(n))
        if k % 2 == 0:
            raise UndefinedResultError("Even root of a negative number is not real.", "x")
        return -((-x) ** (1.0 / k))
    return x ** (1.0 / n)


def root(x: float, n: int) -> float:
    """
    Real n-th root for integer n.

    Returns:
        NaN for an even root of a negative radicand, otherwise the real root
    """
    if n == 0:
        raise DomainError("Root degree must be non-zero.", "n")
    if x < 0:
        if n % 2 == 0:
            return math.nan
        return -((-x) ** (1.0 / n))
    return x ** (1.0 / n)


def newton_root(
    x: float,
    n: int,
    tolerance: float = NEWTON_TOLERANCE,
    max_iterations: int = NEWTON_MAX_ITERATIONS
) -> float:
    """
    n-th root by Newton-Raphson iteration.

    The seed is max(|x|, 1). Iteration stops when successive estimates
    differ by at most tolerance; if the cap is reached first the latest
    estimate is returned without error.

    Args:
        x: Finite radicand (x < 0 allowed for odd n)
        n: Positive integer degree
        tolerance: Convergence threshold (> 0)
        max_iterations: Iteration cap (> 0)

    Returns:
        Root estimate carrying the sign of x
    """
    if n <= 0:
        raise DomainError("Root degree must be a positive integer.", "n")
    if tolerance <= 0.0:
        raise DomainError("Tolerance must be greater than zero.", "tolerance")
    if max_iterations <= 0:
        raise DomainError("Maximum iterations must be greater than zero.", "max_iterations")
    if not math.isfinite(x):
        raise DomainError("Value must be a finite number.", "x")
    if x < 0 and n % 2 == 0:
        raise UndefinedResultError("Even root of a negative number is not real.", "x")

    if x == 0:
        return 0.0
    if n == 1:
        return float(x)

    estimate, iterations, converged = _newton_iterate(
        float(abs(x)), int(n), float(tolerance), int(max_iterations)
    )
    if not converged:
        logger.debug(
            "Newton root of %g (n=%d) stopped after %d iterations without converging",
            x, n, iterations
        )
    return -estimate if x < 0 else estimate


def try_newton_root(
    x: float,
    n: int,
    tolerance: float = NEWTON_TOLERANCE,
    max_iterations: int = NEWTON_MAX_ITERATIONS
) -> float | None:
    """Same as newton_root, but returns None instead of raising on invalid input."""
    try:
        return newton_root(x, n, tolerance, max_iterations)
    except CalculationError:
        return None
