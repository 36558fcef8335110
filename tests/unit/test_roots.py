"""
Unit tests for real roots and the Newton-Raphson root finder.
"""

import logging
import math

import pytest

from physkit.core.types import DomainError, UndefinedResultError
from physkit.mathematics.roots import newton_root, root, safe_root, try_newton_root


class TestSafeRoot:
    """Test root with strict domain checks."""

    def test_square_root(self):
        """sqrt(16) = 4."""
        assert safe_root(16.0, 2) == pytest.approx(4.0)

    def test_cube_root_of_negative(self):
        """Odd root of a negative keeps the sign."""
        assert safe_root(-8.0, 3) == pytest.approx(-2.0)

    def test_even_root_of_negative(self):
        """Even root of a negative is not real."""
        with pytest.raises(UndefinedResultError, match="Even root"):
            safe_root(-8.0, 2)

    def test_fractional_degree_of_negative(self):
        """Non-integer degree with a negative radicand is rejected."""
        with pytest.raises(DomainError, match="integer"):
            safe_root(-8.0, 2.5)

    def test_zero_degree(self):
        """Degree 0 is undefined."""
        with pytest.raises(DomainError, match="non-zero"):
            safe_root(8.0, 0)

    def test_fractional_degree_positive(self):
        """Real degrees are fine for non-negative radicands."""
        assert safe_root(4.0, 0.5) == pytest.approx(16.0)


class TestRoot:
    """Test integer-degree root with NaN for even roots of negatives."""

    def test_even_negative_is_nan(self):
        """Even root of negative returns NaN instead of raising."""
        assert math.isnan(root(-4.0, 2))

    def test_odd_negative(self):
        """Fifth root of -32 is -2."""
        assert root(-32.0, 5) == pytest.approx(-2.0)

    def test_zero_degree(self):
        """Degree 0 is rejected."""
        with pytest.raises(DomainError):
            root(1.0, 0)


class TestNewtonRoot:
    """Test Newton-Raphson iteration."""

    @pytest.mark.parametrize("x, n, expected", [
        (2.0, 2, math.sqrt(2.0)),
        (27.0, 3, 3.0),
        (-27.0, 3, -3.0),
        (0.0625, 4, 0.5),
        (1e6, 6, 10.0),
    ])
    def test_known_roots(self, x, n, expected):
        """Converged estimates match closed-form roots."""
        assert newton_root(x, n) == pytest.approx(expected, rel=1e-9)

    def test_trivial_cases(self):
        """x = 0 and n = 1 short-circuit."""
        assert newton_root(0.0, 5) == 0.0
        assert newton_root(-3.5, 1) == -3.5

    def test_even_root_of_negative(self):
        """Even root of a negative raises."""
        with pytest.raises(UndefinedResultError):
            newton_root(-4.0, 2)

    @pytest.mark.parametrize("kwargs", [
        {"n": 0},
        {"n": 2, "tolerance": 0.0},
        {"n": 2, "max_iterations": 0},
    ])
    def test_invalid_parameters(self, kwargs):
        """Non-positive degree, tolerance or cap is rejected."""
        with pytest.raises(DomainError):
            newton_root(4.0, **kwargs)

    def test_non_finite_input(self):
        """Infinite radicand is rejected."""
        with pytest.raises(DomainError, match="finite"):
            newton_root(math.inf, 2)

    def test_iteration_cap_returns_estimate(self, caplog):
        """Hitting the cap returns the current estimate and logs it."""
        with caplog.at_level(logging.DEBUG, logger="physkit.mathematics.roots"):
            estimate = newton_root(1e12, 2, max_iterations=2)
        assert math.isfinite(estimate)
        assert estimate > math.sqrt(1e12)
        assert "without converging" in caplog.text


class TestTryNewtonRoot:
    """Test the non-raising variant."""

    def test_valid(self):
        """Valid input behaves like newton_root."""
        assert try_newton_root(81.0, 4) == pytest.approx(3.0)

    def test_invalid_returns_none(self):
        """Invalid input returns None."""
        assert try_newton_root(-4.0, 2) is None
        assert try_newton_root(4.0, 0) is None
        assert try_newton_root(math.nan, 3) is None
