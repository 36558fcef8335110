"""
Unit tests for translational, rotational and circular dynamics, momentum and work.
"""

import math

import pytest
from numpy.testing import assert_allclose

from physkit.core.constants import G0
from physkit.core.types import (
    DomainError,
    SequenceLengthError,
    UndefinedResultError,
    Vec2,
    Vec3,
)
from physkit.mechanics import angular_dynamics as ad
from physkit.mechanics import circular_dynamics as cd
from physkit.mechanics import linear_dynamics as ld
from physkit.mechanics import momentum as mo
from physkit.mechanics import work_energy as we


# =============================================================================
# Linear Dynamics
# =============================================================================

class TestNewtonSecondLaw:
    """Test F = m a and its inverses."""

    def test_acceleration_and_force(self):
        """a = F / m, F = m a."""
        assert ld.acceleration(10.0, 2.0) == pytest.approx(5.0)
        assert ld.force(2.0, 5.0) == pytest.approx(10.0)

    def test_zero_mass_rejected(self):
        """Mass must be positive."""
        with pytest.raises(DomainError, match="Mass must be greater than zero"):
            ld.acceleration(10.0, 0.0)

    def test_mass_from_force(self):
        """m = F / a."""
        assert ld.mass_from_force(10.0, 2.0) == pytest.approx(5.0)
        with pytest.raises(DomainError, match="non-zero"):
            ld.mass_from_force(10.0, 0.0)
        with pytest.raises(UndefinedResultError, match="negative"):
            ld.mass_from_force(-10.0, 2.0)

    def test_acceleration_2d(self):
        """Two perpendicular forces on 2 kg."""
        a = ld.acceleration_2d(2.0, [4.0, 6.0], [0.0, math.pi / 2])
        assert isinstance(a, Vec2)
        assert_allclose(a, [2.0, 3.0], atol=1e-12)

    def test_acceleration_3d(self):
        """Sum of 3D forces divided by mass."""
        a = ld.acceleration_3d(2.0, [(1, 2, 3), (1, 0, 1)])
        assert isinstance(a, Vec3)
        assert_allclose(a, [1.0, 1.0, 2.0])


class TestContactForces:
    """Test weight, normal force and friction."""

    def test_weight(self):
        """W = m g."""
        assert ld.weight(2.0) == pytest.approx(2.0 * G0)

    def test_normal_force_incline(self):
        """N = m g cos θ."""
        assert ld.normal_force(1.0) == pytest.approx(G0)
        assert ld.normal_force(1.0, math.pi / 3) == pytest.approx(G0 / 2)

    def test_gravity_components(self):
        """Components of weight on a slope recombine to W."""
        par = ld.gravity_parallel(3.0, 0.4)
        perp = ld.gravity_perpendicular(3.0, 0.4)
        assert math.hypot(par, perp) == pytest.approx(ld.weight(3.0))

    def test_friction(self):
        """F = μ N; negative coefficient rejected."""
        assert ld.friction_force(0.3, 100.0) == pytest.approx(30.0)
        assert ld.max_static_friction(0.5, 100.0) == pytest.approx(50.0)
        with pytest.raises(DomainError, match="Friction coefficient"):
            ld.friction_force(-0.3, 100.0)

    def test_acceleration_with_friction(self):
        """(F - F_f) / m."""
        assert ld.acceleration_with_friction(10.0, 4.0, 2.0) == pytest.approx(3.0)


class TestNetForce:
    """Test resultant forces."""

    def test_net_force_1d(self):
        """Collinear forces add."""
        assert ld.net_force_1d(3.0, -1.0, 2.5) == pytest.approx(4.5)
        assert ld.net_force_1d() == 0.0

    def test_net_force_2d(self):
        """3-4-5 triangle."""
        assert ld.net_force_2d([3.0, 4.0], [0.0, math.pi / 2]) == pytest.approx(5.0)

    def test_net_force_2d_length_mismatch(self):
        """Magnitudes and angles must pair up."""
        with pytest.raises(SequenceLengthError):
            ld.net_force_2d([3.0, 4.0], [0.0])

    def test_net_force_3d(self):
        """Magnitude of the 3D resultant."""
        assert ld.net_force_3d([(1, 2, 2)]) == pytest.approx(3.0)
        assert ld.net_force_3d([]) == 0.0


class TestSpringsAndDrag:
    """Test spring, damper and drag forces."""

    def test_hooke(self):
        """F = -k x."""
        assert ld.spring_force_1d(100.0, 0.1) == pytest.approx(-10.0)
        assert ld.spring_force_2d(10.0, (1.0, -2.0)) == pytest.approx((-10.0, 20.0))
        assert ld.spring_force_3d(2.0, (1.0, 0.0, 3.0)) == pytest.approx((-2.0, 0.0, -6.0))
        assert ld.spring_force_magnitude(50.0, 0.2) == pytest.approx(10.0)

    def test_negative_stiffness(self):
        """Stiffness must be non-negative in every dimension."""
        with pytest.raises(DomainError, match="Stiffness"):
            ld.spring_force_1d(-1.0, 0.1)
        with pytest.raises(DomainError, match="Stiffness"):
            ld.spring_force_3d(-1.0, (0.0, 0.0, 0.0))

    def test_damper(self):
        """F = -k x - c v."""
        assert ld.spring_damper_force_1d(10.0, 2.0, 0.5, 1.0) == pytest.approx(-7.0)
        f = ld.spring_damper_force_2d(10.0, 2.0, (0.5, 0.0), (1.0, 1.0))
        assert f == pytest.approx((-7.0, -2.0))

    def test_wrong_vector_size(self):
        """Vectors must have the right number of components."""
        with pytest.raises(SequenceLengthError):
            ld.spring_force_2d(1.0, (1.0, 2.0, 3.0))

    def test_linear_drag(self):
        """F = -b v."""
        assert ld.linear_drag_1d(0.5, 4.0) == pytest.approx(-2.0)
        assert ld.linear_drag_3d(0.5, (2, 0, -2)) == pytest.approx((-1.0, 0.0, 1.0))

    def test_quadratic_drag_opposes_motion(self):
        """Sign follows -v."""
        assert ld.quadratic_drag(0.5, 2.0) == pytest.approx(-2.0)
        assert ld.quadratic_drag(0.5, -2.0) == pytest.approx(2.0)

    def test_quadratic_drag_3d(self):
        """F = -k |v| v; zero at rest."""
        assert ld.quadratic_drag_3d(1.0, (3.0, 4.0, 0.0)) == pytest.approx((-15.0, -20.0, 0.0))
        assert ld.quadratic_drag_3d(1.0, (0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


class TestInclinedPlane:
    """Test motion on an incline."""

    def test_frictionless_slide(self):
        """a = g sin θ without friction."""
        assert ld.acceleration_down_incline(math.pi / 6, 0.0) == pytest.approx(G0 / 2)

    def test_along_incline_with_gravity(self):
        """With no applied force and no friction a = g sin θ."""
        assert ld.acceleration_along_incline_with_gravity(2.0, math.pi / 6, 0.0, 0.0) == pytest.approx(G0 / 2)

    def test_along_incline(self):
        """Applied force only, on a frictionless slope."""
        assert ld.acceleration_along_incline(2.0, 0.3, 8.0, 0.0) == pytest.approx(4.0)

    def test_start_sliding(self):
        """Sliding begins when tan θ > μs."""
        assert ld.will_start_sliding(math.radians(40.0), 0.7)
        assert not ld.will_start_sliding(math.radians(30.0), 0.7)


# =============================================================================
# Angular Dynamics
# =============================================================================

class TestAngularDynamics:
    """Test moments of inertia and rotational energy."""

    def test_point_inertia(self):
        """I = m r²."""
        assert ad.moment_of_inertia_point(2.0, 3.0) == pytest.approx(18.0)
        assert ad.linear_inertia(4.0) == 4.0

    def test_parallel_axis(self):
        """I = I_c + m d²."""
        assert ad.parallel_axis_theorem(1.0, 2.0, 3.0) == pytest.approx(19.0)

    def test_angular_acceleration(self):
        """α = τ / I, I must be positive."""
        assert ad.angular_acceleration(10.0, 2.0) == pytest.approx(5.0)
        with pytest.raises(DomainError):
            ad.angular_acceleration(10.0, 0.0)
        with pytest.raises(DomainError):
            ad.angular_acceleration(10.0, -2.0)

    def test_rotational_energy(self):
        """E = I ω² / 2."""
        assert ad.rotational_kinetic_energy(2.0, 3.0) == pytest.approx(9.0)


# =============================================================================
# Circular Dynamics
# =============================================================================

class TestCircularDynamics:
    """Test centripetal force and loops."""

    def test_centripetal_force(self):
        """m v² / r equals m ω² r when v = ω r."""
        assert cd.centripetal_force_from_velocity(2.0, 6.0, 3.0) == pytest.approx(24.0)
        assert cd.centripetal_force_from_omega(2.0, 2.0, 3.0) == pytest.approx(24.0)

    def test_zero_radius(self):
        """Radius must be positive."""
        with pytest.raises(DomainError, match="Radius"):
            cd.centripetal_force_from_velocity(1.0, 1.0, 0.0)

    def test_loop_and_bank(self):
        """v_min = sqrt(g r), tan θ = v² / (r g)."""
        assert cd.min_speed_at_top_of_vertical_loop(10.0) == pytest.approx(math.sqrt(G0 * 10.0))
        v = math.sqrt(G0 * 5.0)
        assert cd.bank_angle_no_friction_radians(v, 5.0) == pytest.approx(math.pi / 4)

    def test_direction_to_center(self):
        """Unit vector points toward the centre."""
        d = cd.direction_to_center((2.0, 0.0, 0.0), (0.0, 0.0, 0.0))
        assert isinstance(d, Vec3)
        assert_allclose(d, [-1.0, 0.0, 0.0])

    def test_acceleration_vector(self):
        """Magnitude v² / r toward the centre."""
        a = cd.centripetal_acceleration_vector(4.0, (0.0, 2.0, 0.0), (0.0, 0.0, 0.0))
        assert_allclose(a, [0.0, -8.0, 0.0])

    def test_force_vectors_agree(self):
        """Speed and ω forms agree when v = ω r."""
        position, center = (3.0, 4.0, 0.0), (0.0, 0.0, 0.0)
        omega = 2.0
        f_v = cd.centripetal_force_vector(1.5, omega * 5.0, position, center)
        f_w = cd.centripetal_force_vector_from_omega(1.5, omega, position, center)
        assert_allclose(f_v, f_w)
        assert math.sqrt(sum(c * c for c in f_v)) == pytest.approx(1.5 * omega ** 2 * 5.0)

    @pytest.mark.parametrize("func, args", [
        (cd.direction_to_center, ()),
        (cd.centripetal_acceleration_vector, (1.0,)),
        (cd.centripetal_force_vector, (1.0, 1.0)),
        (cd.centripetal_force_vector_from_omega, (1.0, 1.0)),
    ])
    def test_coincident_points(self, func, args):
        """Position on the centre has no direction."""
        with pytest.raises(UndefinedResultError, match="coincides with center"):
            func(*args, (1.0, 1.0, 1.0), (1.0, 1.0, 1.0))


# =============================================================================
# Momentum
# =============================================================================

class TestMomentum:
    """Test linear and angular momentum."""

    def test_linear(self):
        """p = m v."""
        assert mo.linear_momentum(2.0, -3.0) == pytest.approx(-6.0)
        assert mo.linear_momentum_2d(2.0, 1.0, 2.0) == pytest.approx((2.0, 4.0))
        assert mo.linear_momentum_3d(2.0, 1.0, 2.0, 3.0) == pytest.approx((2.0, 4.0, 6.0))

    def test_negative_mass(self):
        """Mass must be non-negative."""
        with pytest.raises(DomainError):
            mo.linear_momentum(-1.0, 3.0)
        with pytest.raises(DomainError, match="Mass must be non-negative"):
            mo.total_momentum_from_masses([1.0, -1.0], [1.0, 1.0])

    def test_totals(self):
        """System momentum sums."""
        assert mo.total_momentum(1.0, 2.0, -4.0) == pytest.approx(-1.0)
        assert mo.total_momentum() == 0.0
        assert mo.total_momentum_from_masses([1.0, 2.0], [3.0, -1.0]) == pytest.approx(1.0)
        assert mo.total_momentum_2d([(1, 2), (3, 4)]) == pytest.approx((4.0, 6.0))
        assert mo.total_momentum_3d([(1, 2, 3), (-1, 0, 1)]) == pytest.approx((0.0, 2.0, 4.0))

    def test_total_2d_from_masses(self):
        """Σ m v for planar velocities."""
        p = mo.total_momentum_2d_from_masses([1.0, 2.0], [(1, 0), (0, 1)])
        assert p == pytest.approx((1.0, 2.0))
        with pytest.raises(SequenceLengthError):
            mo.total_momentum_2d_from_masses([1.0], [(1, 0), (0, 1)])

    def test_impulse(self):
        """J = F Δt; negative time rejected."""
        assert mo.impulse(10.0, 0.5) == pytest.approx(5.0)
        with pytest.raises(DomainError, match="Delta time"):
            mo.impulse(10.0, -0.5)

    def test_angular(self):
        """L = p r sin θ, magnitude and signed."""
        assert mo.angular_momentum(2.0, 3.0, -math.pi / 2) == pytest.approx(6.0)
        assert mo.signed_angular_momentum(2.0, 3.0, -math.pi / 2) == pytest.approx(-6.0)
        assert mo.angular_momentum_of_mass(1.0, 3.0, 2.0, math.pi / 2) == pytest.approx(6.0)
        assert mo.signed_angular_momentum_of_mass(1.0, 3.0, 2.0, -math.pi / 2) == pytest.approx(-6.0)


# =============================================================================
# Work
# =============================================================================

class TestWork:
    """Test work of gravity and friction."""

    def test_gravity(self):
        """Lifting does negative work."""
        assert we.work_of_gravity_from_height_change(2.0, 3.0) == pytest.approx(-6.0 * G0)
        assert we.work_of_gravity_from_height_change(2.0, -3.0, g=10.0) == pytest.approx(60.0)

    def test_friction_is_non_positive(self):
        """Friction work opposes motion."""
        assert we.work_of_friction_from_force(5.0, 2.0) == pytest.approx(-10.0)
        assert we.work_of_kinetic_friction(0.2, 50.0, 3.0) == pytest.approx(-30.0)
        assert we.work_of_kinetic_friction_horizontal(0.2, 5.0, 3.0, g=10.0) == pytest.approx(-30.0)

    def test_incline(self):
        """Horizontal incline matches the horizontal formula."""
        assert we.work_of_kinetic_friction_incline(0.2, 5.0, 3.0, 0.0) == pytest.approx(
            we.work_of_kinetic_friction_horizontal(0.2, 5.0, 3.0)
        )

    def test_max_static_friction_force(self):
        """μs N."""
        assert we.max_static_friction_force(0.5, 20.0) == pytest.approx(10.0)

    def test_negative_distance(self):
        """Distance must be non-negative."""
        with pytest.raises(DomainError, match="Distance"):
            we.work_of_kinetic_friction(0.2, 50.0, -1.0)
