"""
Translational dynamics: Newton's second law, contact forces, springs and drag.

Gravity is standard gravity G0; angles are in radians. Vector inputs are
any 2- or 3-element sequences, vector outputs are Vec2 / Vec3.
"""

import math
from typing import Iterable, Sequence

import numpy as np

from ..core.constants import G0
from ..core.types import UndefinedResultError, Vec2, Vec3
from ..core.validation import (
    as_float_array,
    as_vector,
    as_vector_array,
    require_non_negative,
    require_non_zero,
    require_positive,
    require_present,
    require_same_length,
)


def _require_mass(mass: float) -> None:
    require_positive(mass, "mass")


# =============================================================================
# Newton's Second Law
# =============================================================================

def acceleration(force: float, mass: float) -> float:
    """a = F / m."""
    _require_mass(mass)
    return force / mass


def acceleration_2d(mass: float, magnitudes: Iterable[float], angles: Iterable[float]) -> Vec2:
    """Acceleration from planar forces given as magnitudes and directions."""
    _require_mass(mass)
    fx, fy = net_force_2d_components(magnitudes, angles)
    return Vec2(fx / mass, fy / mass)


def acceleration_3d(mass: float, forces: Iterable[Sequence[float]]) -> Vec3:
    _require_mass(mass)
    fx, fy, fz = net_force_3d_components(forces)
    return Vec3(fx / mass, fy / mass, fz / mass)


def force(mass: float, acceleration: float) -> float:
    """F = m a."""
    _require_mass(mass)
    return mass * acceleration


def mass_from_force(force: float, acceleration: float) -> float:
    """
    m = F / a.

    Raises:
        DomainError: If acceleration == 0
        UndefinedResultError: If F and a have opposite signs (negative mass)
    """
    require_non_zero(acceleration, "acceleration")
    mass = force / acceleration
    if mass < 0.0:
        raise UndefinedResultError(
            "Calculated mass is negative. Check force and acceleration signs.", "force"
        )
    return mass


# =============================================================================
# Weight, Normal Force and Friction
# =============================================================================

def weight(mass: float) -> float:
    """W = m g."""
    _require_mass(mass)
    return mass * G0


def normal_force(mass: float, angle: float = 0.0) -> float:
    """N = m g cos θ on a plane inclined by θ (θ = 0 is horizontal)."""
    _require_mass(mass)
    return mass * G0 * math.cos(angle)


def friction_force(friction_coefficient: float, normal_force: float) -> float:
    """Kinetic friction magnitude μ N."""
    require_non_negative(friction_coefficient, "friction_coefficient", label="Friction coefficient")
    return friction_coefficient * normal_force


def max_static_friction(static_friction_coefficient: float, normal_force: float) -> float:
    require_non_negative(
        static_friction_coefficient, "static_friction_coefficient",
        label="Static friction coefficient"
    )
    return static_friction_coefficient * normal_force


def gravity_parallel(mass: float, angle: float) -> float:
    """Down-slope component of weight m g sin θ."""
    _require_mass(mass)
    return mass * G0 * math.sin(angle)


def gravity_perpendicular(mass: float, angle: float) -> float:
    """Component of weight pressing into the slope m g cos θ."""
    _require_mass(mass)
    return mass * G0 * math.cos(angle)


def acceleration_with_friction(driving_force: float, friction_force: float, mass: float) -> float:
    _require_mass(mass)
    return (driving_force - friction_force) / mass


# =============================================================================
# Net Force
# =============================================================================

def net_force_1d(*forces: float) -> float:
    """Sum of collinear forces."""
    return float(sum(forces))


def net_force_2d_components(magnitudes: Iterable[float], angles: Iterable[float]) -> Vec2:
    """
    Resultant (ΣF cos θ, ΣF sin θ) of planar forces.

    Args:
        magnitudes: Force magnitudes
        angles: Direction of each force from the +x axis, radians
    """
    require_present(magnitudes, "magnitudes")
    require_present(angles, "angles")
    f = as_float_array(magnitudes, "magnitudes", allow_empty=True)
    theta = as_float_array(angles, "angles", allow_empty=True)
    require_same_length(f, theta, "magnitudes", "angles")
    return Vec2(float(np.sum(f * np.cos(theta))), float(np.sum(f * np.sin(theta))))


def net_force_2d(magnitudes: Iterable[float], angles: Iterable[float]) -> float:
    """Magnitude of the planar resultant."""
    fx, fy = net_force_2d_components(magnitudes, angles)
    return math.hypot(fx, fy)


def net_force_3d_components(forces: Iterable[Sequence[float]]) -> Vec3:
    data = as_vector_array(forces, 3, "forces", allow_empty=True)
    total = data.sum(axis=0)
    return Vec3(float(total[0]), float(total[1]), float(total[2]))


def net_force_3d(forces: Iterable[Sequence[float]]) -> float:
    fx, fy, fz = net_force_3d_components(forces)
    return math.sqrt(fx * fx + fy * fy + fz * fz)


# =============================================================================
# Springs and Dampers
# =============================================================================

def spring_force_1d(stiffness: float, displacement: float) -> float:
    """Hooke's law F = -k x."""
    require_non_negative(stiffness, "stiffness")
    return -stiffness * displacement


def spring_force_2d(stiffness: float, displacement: Sequence[float]) -> Vec2:
    require_non_negative(stiffness, "stiffness")
    x, y = as_vector(displacement, 2, "displacement")
    return Vec2(-stiffness * x, -stiffness * y)


def spring_force_3d(stiffness: float, displacement: Sequence[float]) -> Vec3:
    require_non_negative(stiffness, "stiffness")
    x, y, z = as_vector(displacement, 3, "displacement")
    return Vec3(-stiffness * x, -stiffness * y, -stiffness * z)


def spring_force_magnitude(stiffness: float, displacement_magnitude: float) -> float:
    """|F| = k |x|."""
    require_non_negative(stiffness, "stiffness")
    return stiffness * displacement_magnitude


def spring_damper_force_1d(stiffness: float, damping: float, displacement: float, velocity: float) -> float:
    """Kelvin-Voigt element F = -k x - c v."""
    require_non_negative(stiffness, "stiffness")
    require_non_negative(damping, "damping")
    return -stiffness * displacement - damping * velocity


def spring_damper_force_2d(
    stiffness: float,
    damping: float,
    displacement: Sequence[float],
    velocity: Sequence[float]
) -> Vec2:
    require_non_negative(stiffness, "stiffness")
    require_non_negative(damping, "damping")
    x, y = as_vector(displacement, 2, "displacement")
    vx, vy = as_vector(velocity, 2, "velocity")
    return Vec2(-stiffness * x - damping * vx, -stiffness * y - damping * vy)


def spring_damper_force_3d(
    stiffness: float,
    damping: float,
    displacement: Sequence[float],
    velocity: Sequence[float]
) -> Vec3:
    require_non_negative(stiffness, "stiffness")
    require_non_negative(damping, "damping")
    x, y, z = as_vector(displacement, 3, "displacement")
    vx, vy, vz = as_vector(velocity, 3, "velocity")
    return Vec3(
        -stiffness * x - damping * vx,
        -stiffness * y - damping * vy,
        -stiffness * z - damping * vz
    )


# =============================================================================
# Drag
# =============================================================================

def linear_drag_1d(drag_coefficient: float, velocity: float) -> float:
    """Stokes drag F = -b v."""
    require_non_negative(drag_coefficient, "drag_coefficient", label="Drag coefficient")
    return -drag_coefficient * velocity


def linear_drag_2d(drag_coefficient: float, velocity: Sequence[float]) -> Vec2:
    require_non_negative(drag_coefficient, "drag_coefficient", label="Drag coefficient")
    vx, vy = as_vector(velocity, 2, "velocity")
    return Vec2(-drag_coefficient * vx, -drag_coefficient * vy)


def linear_drag_3d(drag_coefficient: float, velocity: Sequence[float]) -> Vec3:
    require_non_negative(drag_coefficient, "drag_coefficient", label="Drag coefficient")
    vx, vy, vz = as_vector(velocity, 3, "velocity")
    return Vec3(-drag_coefficient * vx, -drag_coefficient * vy, -drag_coefficient * vz)


def quadratic_drag(k: float, velocity: float) -> float:
    """Quadratic drag F = -k v |v| (opposes motion)."""
    require_non_negative(k, "k", label="Drag coefficient k")
    return -k * velocity * abs(velocity)


def quadratic_drag_3d(k: float, velocity: Sequence[float]) -> Vec3:
    """
    F = -k |v| v.

    A body at rest experiences no drag.
    """
    require_non_negative(k, "k", label="Drag coefficient k")
    vx, vy, vz = as_vector(velocity, 3, "velocity")
    speed = math.sqrt(vx * vx + vy * vy + vz * vz)
    if speed == 0.0:
        return Vec3(0.0, 0.0, 0.0)
    return Vec3(-k * speed * vx, -k * speed * vy, -k * speed * vz)


# =============================================================================
# Inclined Plane
# =============================================================================

def acceleration_down_incline(angle: float, kinetic_friction_coefficient: float) -> float:
    """a = g (sin θ - μk cos θ) for a block sliding freely down the slope."""
    require_non_negative(
        kinetic_friction_coefficient, "kinetic_friction_coefficient",
        label="Kinetic friction coefficient"
    )
    return G0 * (math.sin(angle) - kinetic_friction_coefficient * math.cos(angle))


def acceleration_along_incline(
    mass: float,
    angle: float,
    force_parallel: float,
    kinetic_friction_coefficient: float
) -> float:
    """a = (F∥ - μk m g cos θ) / m, gravity along the slope not included."""
    require_non_negative(
        kinetic_friction_coefficient, "kinetic_friction_coefficient",
        label="Kinetic friction coefficient"
    )
    _require_mass(mass)
    return (force_parallel - kinetic_friction_coefficient * mass * G0 * math.cos(angle)) / mass


def acceleration_along_incline_with_gravity(
    mass: float,
    angle: float,
    force_parallel: float,
    kinetic_friction_coefficient: float
) -> float:
    """a = (F∥ + m g sin θ - μk m g cos θ) / m."""
    _require_mass(mass)
    require_non_negative(
        kinetic_friction_coefficient, "kinetic_friction_coefficient",
        label="Kinetic friction coefficient"
    )
    normal = mass * G0 * math.cos(angle)
    friction = kinetic_friction_coefficient * normal
    parallel = mass * G0 * math.sin(angle)
    return (force_parallel + parallel - friction) / mass


def will_start_sliding(angle: float, static_friction_coefficient: float) -> bool:
    """True once tan θ exceeds μs."""
    require_non_negative(
        static_friction_coefficient, "static_friction_coefficient",
        label="Static friction coefficient"
    )
    return math.tan(angle) > static_friction_coefficient
