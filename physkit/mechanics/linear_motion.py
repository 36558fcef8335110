"""
Uniformly accelerated rectilinear motion (SUVAT).

    s = v0 t + a t² / 2
    v = v0 + a t
    v² = v0² + 2 a s
"""

import math

from ..core.constants import G0
from ..core.types import UndefinedResultError
from ..core.validation import require_non_zero


def displacement(initial_velocity: float, time: float, acceleration: float = 0.0) -> float:
    """s = v0 t + a t² / 2."""
    return initial_velocity * time + 0.5 * acceleration * time * time


def final_velocity(initial_velocity: float, acceleration: float, time: float) -> float:
    return initial_velocity + acceleration * time


def free_fall_distance(time: float, initial_velocity: float = 0.0) -> float:
    """Distance fallen under standard gravity (positive downward)."""
    return initial_velocity * time + 0.5 * G0 * time * time


def time_from_displacement(displacement: float, velocity: float) -> float:
    """t = s / v for uniform motion."""
    require_non_zero(velocity, "velocity")
    return displacement / velocity


def acceleration_from_velocities(initial_velocity: float, final_velocity: float, time: float) -> float:
    require_non_zero(time, "time")
    return (final_velocity - initial_velocity) / time


def time_from_velocities(initial_velocity: float, final_velocity: float, acceleration: float) -> float:
    require_non_zero(acceleration, "acceleration")
    return (final_velocity - initial_velocity) / acceleration


def final_speed_from_displacement(initial_velocity: float, acceleration: float, displacement: float) -> float:
    """
    Final speed from v² = v0² + 2 a s.

    Returns:
        Non-negative speed |v|

    Raises:
        UndefinedResultError: If v0² + 2 a s < 0 (the body never reaches s)
    """
    value = initial_velocity * initial_velocity + 2.0 * acceleration * displacement
    if value < 0.0:
        raise UndefinedResultError(
            "Negative value under square root: displacement is not reachable.",
            "displacement"
        )
    return math.sqrt(value)


def displacement_from_velocities(initial_velocity: float, final_velocity: float, acceleration: float) -> float:
    """s = (v² - v0²) / (2 a)."""
    require_non_zero(acceleration, "acceleration")
    return (final_velocity * final_velocity - initial_velocity * initial_velocity) / (2.0 * acceleration)


def position(initial_position: float, velocity: float, time: float, acceleration: float = 0.0) -> float:
    """x = x0 + v t + a t² / 2."""
    return initial_position + velocity * time + 0.5 * acceleration * time * time


def initial_velocity_from_position(
    position: float,
    initial_position: float,
    acceleration: float,
    time: float
) -> float:
    """v0 = (x - x0 - a t² / 2) / t."""
    require_non_zero(time, "time")
    return (position - initial_position - 0.5 * acceleration * time * time) / time


def velocity_from_positions(position: float, initial_position: float, time: float) -> float:
    """Average velocity (x - x0) / t."""
    require_non_zero(time, "time")
    return (position - initial_position) / time
