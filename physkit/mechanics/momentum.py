"""
Linear and angular momentum, impulse.

    p = m v
    J = F Δt
    L = r p sin θ
"""

import math
from typing import Iterable, Sequence

import numpy as np

from ..core.types import DomainError, Vec2, Vec3
from ..core.validation import (
    as_float_array,
    as_vector_array,
    require_non_negative,
    require_present,
    require_same_length,
)


# =============================================================================
# Linear Momentum
# =============================================================================

def linear_momentum(mass: float, velocity: float) -> float:
    """p = m v (m >= 0)."""
    require_non_negative(mass, "mass")
    return mass * velocity


def linear_momentum_2d(mass: float, velocity_x: float, velocity_y: float) -> Vec2:
    require_non_negative(mass, "mass")
    return Vec2(mass * velocity_x, mass * velocity_y)


def linear_momentum_3d(mass: float, velocity_x: float, velocity_y: float, velocity_z: float) -> Vec3:
    require_non_negative(mass, "mass")
    return Vec3(mass * velocity_x, mass * velocity_y, mass * velocity_z)


# =============================================================================
# System Totals
# =============================================================================

def total_momentum(*momenta: float) -> float:
    """Σp of collinear momenta."""
    return float(np.sum(as_float_array(momenta, "momenta", allow_empty=True)))


def _masses(masses: Iterable[float]) -> np.ndarray:
    m = as_float_array(masses, "masses", allow_empty=True)
    if np.any(m < 0.0):
        raise DomainError("Mass must be non-negative.", "masses")
    return m


def total_momentum_from_masses(masses: Iterable[float], velocities: Iterable[float]) -> float:
    """Σ m_i v_i."""
    require_present(masses, "masses")
    require_present(velocities, "velocities")
    m = _masses(masses)
    v = as_float_array(velocities, "velocities", allow_empty=True)
    require_same_length(m, v, "masses", "velocities")
    return float(np.sum(m * v))


def total_momentum_2d(momenta: Iterable[Sequence[float]]) -> Vec2:
    data = as_vector_array(momenta, 2, "momenta", allow_empty=True)
    total = data.sum(axis=0)
    return Vec2(float(total[0]), float(total[1]))


def total_momentum_2d_from_masses(
    masses: Iterable[float],
    velocities: Iterable[Sequence[float]]
) -> Vec2:
    """Σ m_i v_i for planar velocities."""
    require_present(masses, "masses")
    m = _masses(masses)
    v = as_vector_array(velocities, 2, "velocities", allow_empty=True)
    require_same_length(m, v, "masses", "velocities")
    total = (m[:, np.newaxis] * v).sum(axis=0)
    return Vec2(float(total[0]), float(total[1]))


def total_momentum_3d(momenta: Iterable[Sequence[float]]) -> Vec3:
    data = as_vector_array(momenta, 3, "momenta", allow_empty=True)
    total = data.sum(axis=0)
    return Vec3(float(total[0]), float(total[1]), float(total[2]))


# =============================================================================
# Impulse
# =============================================================================

def impulse(force: float, delta_time: float) -> float:
    """J = F Δt for a constant force (Δt >= 0)."""
    require_non_negative(delta_time, "delta_time", label="Delta time")
    return force * delta_time


# =============================================================================
# Angular Momentum
# =============================================================================

def angular_momentum(radius: float, linear_momentum: float, angle: float) -> float:
    """
    Magnitude-style angular momentum L = p |r sin θ|.

    Args:
        radius: Distance from the reference point (>= 0)
        linear_momentum: Linear momentum p
        angle: Angle between r and p, radians
    """
    require_non_negative(radius, "radius")
    return linear_momentum * abs(radius * math.sin(angle))


def angular_momentum_of_mass(mass: float, velocity: float, radius: float, angle: float) -> float:
    return angular_momentum(radius, linear_momentum(mass, velocity), angle)


def signed_angular_momentum(radius: float, linear_momentum: float, angle: float) -> float:
    """L = p r sin θ; counterclockwise positive."""
    require_non_negative(radius, "radius")
    return linear_momentum * radius * math.sin(angle)


def signed_angular_momentum_of_mass(mass: float, velocity: float, radius: float, angle: float) -> float:
    return signed_angular_momentum(radius, linear_momentum(mass, velocity), angle)
