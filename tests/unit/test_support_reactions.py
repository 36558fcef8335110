"""
Unit tests for beam support reactions, shear force and bending moment.

Simply supported beam of span L = 4 with a point load P = 10 at x = 2:
    R_A = R_B = 5, M_max = P L / 4 = 10 at midspan
Uniform load q over the full span:
    R_A = R_B = q L / 2, M(L/2) = q L² / 8
"""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from physkit.core.types import (
    DomainError,
    MissingArgumentError,
    PointLoad,
    Reactions,
    SequenceLengthError,
    UniformLoad,
)
from physkit.mechanics.support_reactions import (
    bending_moment_at_x,
    distributed_load_to_point_load_uniform,
    moment_diagram,
    normal_force_at_x,
    shear_diagram,
    shear_force_at_x,
    single_support_reaction_1d,
    support_reactions_with_udl_1d,
    two_support_reactions_1d,
)


class TestReactions:
    """Test support reaction solvers."""

    def test_single_support(self):
        """A single support carries the sum of loads."""
        assert single_support_reaction_1d([1.0, 2.0, 3.5]) == pytest.approx(6.5)
        assert single_support_reaction_1d([]) == 0.0

    def test_symmetric_load(self):
        """Load at midspan splits evenly."""
        r = two_support_reactions_1d([10.0], [2.0], 0.0, 4.0)
        assert isinstance(r, Reactions)
        assert r.reaction_a == pytest.approx(5.0)
        assert r.reaction_b == pytest.approx(5.0)

    def test_asymmetric_load(self):
        """Load at quarter span: 7.5 / 2.5."""
        r = two_support_reactions_1d([10.0], [1.0], 0.0, 4.0)
        assert r.reaction_a == pytest.approx(7.5)
        assert r.reaction_b == pytest.approx(2.5)

    def test_reactions_balance_loads(self):
        """R_A + R_B equals the total load."""
        loads = [3.0, 7.0, -2.0]
        r = two_support_reactions_1d(loads, [0.5, 2.5, 6.0], 1.0, 5.0)
        assert r.reaction_a + r.reaction_b == pytest.approx(sum(loads))

    def test_coincident_supports(self):
        """Supports at the same position cannot resolve moments."""
        with pytest.raises(DomainError, match="Support positions must be different"):
            two_support_reactions_1d([10.0], [1.0], 2.0, 2.0)

    def test_length_mismatch(self):
        """Loads and positions must pair up."""
        with pytest.raises(SequenceLengthError):
            two_support_reactions_1d([10.0, 5.0], [1.0], 0.0, 4.0)

    def test_none_udls(self):
        """None UDL list raises MissingArgumentError."""
        with pytest.raises(MissingArgumentError):
            support_reactions_with_udl_1d([], [], None, 0.0, 4.0)

    def test_full_span_udl(self):
        """Uniform load over the span splits evenly."""
        r = support_reactions_with_udl_1d([], [], [UniformLoad(2.0, 0.0, 4.0)], 0.0, 4.0)
        assert r == pytest.approx((4.0, 4.0))

    def test_udl_plus_point_load(self):
        """Superposition of a UDL and a point load."""
        r = support_reactions_with_udl_1d([10.0], [1.0], [(2.0, 0.0, 4.0)], 0.0, 4.0)
        assert r.reaction_a == pytest.approx(7.5 + 4.0)
        assert r.reaction_b == pytest.approx(2.5 + 4.0)

    def test_reversed_udl(self):
        """UDL with end < start is rejected."""
        with pytest.raises(DomainError, match="UDL segment end"):
            support_reactions_with_udl_1d([], [], [(1.0, 3.0, 1.0)], 0.0, 4.0)

    def test_logs_reactions(self, caplog):
        """Solved reactions are reported at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="physkit.mechanics.support_reactions"):
            two_support_reactions_1d([10.0], [2.0], 0.0, 4.0)
        assert "Beam reactions solved" in caplog.text


class TestDistributedLoad:
    """Test UDL resultant."""

    def test_resultant(self):
        """q (end - start) at the midpoint."""
        p = distributed_load_to_point_load_uniform(3.0, 1.0, 5.0)
        assert isinstance(p, PointLoad)
        assert p.force == pytest.approx(12.0)
        assert p.position == pytest.approx(3.0)

    def test_zero_length(self):
        """A zero-length segment has no resultant force."""
        assert distributed_load_to_point_load_uniform(3.0, 2.0, 2.0).force == 0.0

    def test_reversed(self):
        """end < start is rejected."""
        with pytest.raises(DomainError):
            distributed_load_to_point_load_uniform(3.0, 5.0, 1.0)


class TestInternalForces:
    """Test shear force, bending moment and normal force at a section."""

    ARGS = (5.0, 5.0, 0.0, 4.0, [10.0], [2.0], [])

    def test_shear_left_limit_at_load(self):
        """At the load position the load itself is not yet counted."""
        assert shear_force_at_x(2.0, *self.ARGS) == pytest.approx(5.0)

    def test_shear_right_of_load(self):
        """Just right of the load the shear jumps by -P."""
        assert shear_force_at_x(2.0001, *self.ARGS) == pytest.approx(-5.0)

    def test_shear_at_support(self):
        """At x = support A the reaction is not yet counted."""
        assert shear_force_at_x(0.0, *self.ARGS) == 0.0

    def test_shear_beyond_beam(self):
        """Past both supports everything balances."""
        assert shear_force_at_x(4.5, *self.ARGS) == pytest.approx(0.0)

    def test_moment_at_midspan(self):
        """M_max = P L / 4."""
        assert bending_moment_at_x(2.0, *self.ARGS) == pytest.approx(10.0)
        assert bending_moment_at_x(1.0, *self.ARGS) == pytest.approx(5.0)

    def test_udl_moment_inside_segment(self):
        """M(L/2) = q L² / 8 for a full-span UDL."""
        q, span = 2.0, 4.0
        args = (4.0, 4.0, 0.0, span, [], [], [(q, 0.0, span)])
        assert bending_moment_at_x(2.0, *args) == pytest.approx(q * span ** 2 / 8)
        assert shear_force_at_x(1.0, *args) == pytest.approx(2.0)

    def test_udl_fully_left_of_section(self):
        """A UDL entirely left of x acts as its resultant at the centroid."""
        args = (0.0, 0.0, 10.0, 20.0, [], [], [(2.0, 0.0, 2.0)])
        assert shear_force_at_x(5.0, *args) == pytest.approx(-4.0)
        assert bending_moment_at_x(5.0, *args) == pytest.approx(-16.0)

    def test_normal_force(self):
        """N(x) = R - axial loads left of x."""
        assert normal_force_at_x(1.5, 10.0, [3.0, 4.0], [1.0, 2.0]) == pytest.approx(7.0)
        assert normal_force_at_x(1.0, 10.0, [3.0, 4.0], [1.0, 2.0]) == pytest.approx(10.0)


class TestDiagrams:
    """Test shear and moment diagrams."""

    ARGS = (5.0, 5.0, 0.0, 4.0, [10.0], [2.0], [])

    def test_input_order_preserved(self):
        """Unsorted xs are evaluated in the given order."""
        xs = [3.0, 1.0, 2.0]
        assert_allclose(shear_diagram(xs, *self.ARGS), [-5.0, 5.0, 5.0])
        assert_allclose(moment_diagram(xs, *self.ARGS), [5.0, 5.0, 10.0])

    def test_empty(self):
        """Empty xs give an empty diagram."""
        assert shear_diagram([], *self.ARGS).size == 0
        assert moment_diagram(np.array([]), *self.ARGS).size == 0

    def test_matches_pointwise(self):
        """Diagram values equal the single-point evaluations."""
        xs = np.linspace(0.0, 4.0, 9)
        udl = [(1.5, 0.5, 3.0)]
        args = (6.0, 3.0, 0.0, 4.0, [2.0, 4.0], [1.0, 3.5], udl)
        expected = [bending_moment_at_x(x, *args) for x in xs]
        assert_allclose(moment_diagram(xs, *args), expected)

    def test_none_xs(self):
        """None xs raise MissingArgumentError."""
        with pytest.raises(MissingArgumentError):
            shear_diagram(None, *self.ARGS)
