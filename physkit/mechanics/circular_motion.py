"""
Circular motion kinematics.

Angles in radians, angular velocity in rad/s, angular acceleration in rad/s².
Period and frequency are always returned as non-negative magnitudes.
"""

import math

from ..core.types import UndefinedResultError
from ..core.validation import require_non_zero
from ..mathematics.angles import deg_to_rad


# =============================================================================
# Angular Kinematics
# =============================================================================

def arc_length(radius: float, angle_rad: float) -> float:
    """s = r θ."""
    return radius * angle_rad


def arc_length_from_degrees(radius: float, angle_deg: float) -> float:
    return radius * deg_to_rad(angle_deg)


def angular_displacement(arc_length: float, radius: float) -> float:
    """θ = s / r."""
    require_non_zero(radius, "radius")
    return arc_length / radius


def angular_displacement_from_motion(
    initial_angular_velocity: float,
    angular_acceleration: float,
    time: float
) -> float:
    """θ = ω0 t + α t² / 2."""
    return initial_angular_velocity * time + 0.5 * angular_acceleration * time * time


def angular_velocity_radians(angle_rad: float, time: float) -> float:
    require_non_zero(time, "time")
    return angle_rad / time


def angular_velocity_degrees(angle_deg: float, time: float) -> float:
    """Angular velocity in rad/s from an angle given in degrees."""
    require_non_zero(time, "time")
    return deg_to_rad(angle_deg) / time


def final_angular_velocity(initial_angular_velocity: float, angular_acceleration: float, time: float) -> float:
    return initial_angular_velocity + angular_acceleration * time


def angular_acceleration(
    initial_angular_velocity: float,
    final_angular_velocity: float,
    time: float
) -> float:
    require_non_zero(time, "time")
    return (final_angular_velocity - initial_angular_velocity) / time


def time_from_angular_velocities(
    initial_angular_velocity: float,
    final_angular_velocity: float,
    angular_acceleration: float
) -> float:
    require_non_zero(angular_acceleration, "angular_acceleration")
    return (final_angular_velocity - initial_angular_velocity) / angular_acceleration


def final_angular_speed_from_displacement(
    initial_angular_velocity: float,
    angular_acceleration: float,
    angular_displacement: float
) -> float:
    """
    |ω| from ω² = ω0² + 2 α θ.

    Raises:
        UndefinedResultError: If the radicand is negative
    """
    value = (initial_angular_velocity * initial_angular_velocity
             + 2.0 * angular_acceleration * angular_displacement)
    if value < 0.0:
        raise UndefinedResultError(
            "Negative value under square root: angular displacement is not reachable.",
            "angular_displacement"
        )
    return math.sqrt(value)


def angular_displacement_from_velocities(
    initial_angular_velocity: float,
    final_angular_velocity: float,
    angular_acceleration: float
) -> float:
    """θ = (ω² - ω0²) / (2 α)."""
    require_non_zero(angular_acceleration, "angular_acceleration")
    return ((final_angular_velocity * final_angular_velocity
             - initial_angular_velocity * initial_angular_velocity)
            / (2.0 * angular_acceleration))


# =============================================================================
# Linear <-> Angular
# =============================================================================

def linear_velocity(angular_velocity: float, radius: float) -> float:
    """v = ω r."""
    return angular_velocity * radius


def angular_velocity_from_linear(linear_velocity: float, radius: float) -> float:
    require_non_zero(radius, "radius")
    return linear_velocity / radius


def tangential_acceleration(angular_acceleration: float, radius: float) -> float:
    return angular_acceleration * radius


def centripetal_acceleration_from_linear(linear_velocity: float, radius: float) -> float:
    """a_c = v² / r."""
    require_non_zero(radius, "radius")
    return linear_velocity * linear_velocity / radius


def centripetal_acceleration_from_angular(angular_velocity: float, radius: float) -> float:
    """a_c = ω² r."""
    require_non_zero(radius, "radius")
    return angular_velocity * angular_velocity * radius


def total_acceleration(tangential_acceleration: float, centripetal_acceleration: float) -> float:
    """Magnitude of the perpendicular tangential and centripetal components."""
    return math.hypot(tangential_acceleration, centripetal_acceleration)


# =============================================================================
# Period and Frequency
# =============================================================================

def period_from_angular_velocity(angular_velocity: float) -> float:
    """T = 2π / |ω|."""
    require_non_zero(angular_velocity, "angular_velocity")
    return 2.0 * math.pi / abs(angular_velocity)


def period_from_frequency(frequency: float) -> float:
    require_non_zero(frequency, "frequency")
    return 1.0 / abs(frequency)


def frequency_from_period(period: float) -> float:
    require_non_zero(period, "period")
    return 1.0 / abs(period)


def frequency_from_angular_velocity(angular_velocity: float) -> float:
    """f = |ω| / 2π."""
    return abs(angular_velocity) / (2.0 * math.pi)
