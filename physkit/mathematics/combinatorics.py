"""
Factorials, permutations and combinations.

Arguments are bounded so every result fits in a signed 64-bit integer
(20! and 33!!).
"""

from ..core.constants import DOUBLE_FACTORIAL_LIMIT, FACTORIAL_LIMIT
from ..core.types import DomainError


def _require_factorial_argument(n: int, limit: int, name: str = "n") -> None:
    if n < 0 or n > limit:
        raise DomainError(f"Value must be between 0 and {limit}.", name)


def factorial(n: int) -> int:
    """
    n! for 0 <= n <= 20.

    Raises:
        DomainError: If n is outside [0, 20]
    """
    _require_factorial_argument(n, FACTORIAL_LIMIT)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def double_factorial(n: int) -> int:
    """n!! = n * (n-2) * (n-4) * ... for 0 <= n <= 33."""
    _require_factorial_argument(n, DOUBLE_FACTORIAL_LIMIT)
    result = 1
    for i in range(n, 1, -2):
        result *= i
    return result


def _require_k(n: int, k: int) -> None:
    _require_factorial_argument(n, FACTORIAL_LIMIT)
    if k < 0 or k > n:
        raise DomainError("Value of k must be between 0 and n (inclusive).", "k")


def permutation(n: int, k: int) -> int:
    """Ordered selections P(n, k) = n! / (n-k)!."""
    _require_k(n, k)
    if k == 0:
        return 1
    return factorial(n) // factorial(n - k)


def combination(n: int, k: int) -> int:
    """
    Unordered selections C(n, k) = n! / (k! (n-k)!).

    Symmetric: combination(n, k) == combination(n, n - k).
    """
    _require_k(n, k)
    if k == 0 or k == n:
        return 1
    return permutation(n, k) // factorial(k)
