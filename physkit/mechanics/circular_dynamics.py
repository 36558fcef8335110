"""
Dynamics of uniform circular motion.

Scalar forms take the radius directly; vector forms take the body position
and the centre of rotation as 3-element sequences and point toward the
centre.
"""

import math
from typing import Sequence

from ..core.constants import G0
from ..core.types import UndefinedResultError, Vec3
from ..core.validation import as_vector, require_non_negative, require_positive


def _offset_to_center(position: Sequence[float], center: Sequence[float]) -> tuple:
    px, py, pz = as_vector(position, 3, "position")
    cx, cy, cz = as_vector(center, 3, "center")
    return cx - px, cy - py, cz - pz


def _coincident(quantity: str) -> UndefinedResultError:
    return UndefinedResultError(
        f"Position coincides with center; {quantity} is undefined.", "position"
    )


# =============================================================================
# Scalar Forms
# =============================================================================

def centripetal_force_from_velocity(mass: float, linear_velocity: float, radius: float) -> float:
    """F_c = m v² / r."""
    require_positive(radius, "radius")
    require_non_negative(mass, "mass")
    return mass * linear_velocity * linear_velocity / radius


def centripetal_force_from_omega(mass: float, omega: float, radius: float) -> float:
    """F_c = m ω² r."""
    require_positive(radius, "radius")
    require_non_negative(mass, "mass")
    return mass * omega * omega * radius


def min_speed_at_top_of_vertical_loop(radius: float) -> float:
    """v_min = sqrt(g r): gravity alone supplies the centripetal force at the top."""
    require_positive(radius, "radius")
    return math.sqrt(G0 * radius)


def bank_angle_no_friction_radians(linear_velocity: float, radius: float) -> float:
    """θ = atan(v² / (r g))."""
    require_positive(radius, "radius")
    return math.atan(linear_velocity * linear_velocity / (radius * G0))


# =============================================================================
# Vector Forms
# =============================================================================

def direction_to_center(position: Sequence[float], center: Sequence[float]) -> Vec3:
    """
    Unit vector from position toward center.

    Raises:
        UndefinedResultError: If position and center coincide
    """
    dx, dy, dz = _offset_to_center(position, center)
    length = math.sqrt(dx * dx + dy * dy + dz * dz)
    if length == 0.0:
        raise _coincident("direction to center")
    return Vec3(dx / length, dy / length, dz / length)


def centripetal_acceleration_vector(
    linear_speed: float,
    position: Sequence[float],
    center: Sequence[float]
) -> Vec3:
    """a_c = (v² / r) · r̂, pointing toward the centre."""
    dx, dy, dz = _offset_to_center(position, center)
    radius = math.sqrt(dx * dx + dy * dy + dz * dz)
    if radius == 0.0:
        raise _coincident("centripetal acceleration")
    a_c = linear_speed * linear_speed / radius
    return Vec3(a_c * dx / radius, a_c * dy / radius, a_c * dz / radius)


def centripetal_force_vector(
    mass: float,
    linear_speed: float,
    position: Sequence[float],
    center: Sequence[float]
) -> Vec3:
    """F_c = m v² d / |d|², where d is the offset to the centre."""
    require_positive(mass, "mass")
    dx, dy, dz = _offset_to_center(position, center)
    r2 = dx * dx + dy * dy + dz * dz
    if r2 == 0.0:
        raise _coincident("centripetal force")
    factor = mass * linear_speed * linear_speed / r2
    return Vec3(factor * dx, factor * dy, factor * dz)


def centripetal_force_vector_from_omega(
    mass: float,
    omega: float,
    position: Sequence[float],
    center: Sequence[float]
) -> Vec3:
    """F_c = m ω² d."""
    require_positive(mass, "mass")
    dx, dy, dz = _offset_to_center(position, center)
    if dx == 0.0 and dy == 0.0 and dz == 0.0:
        raise _coincident("centripetal force")
    factor = mass * omega * omega
    return Vec3(factor * dx, factor * dy, factor * dz)
