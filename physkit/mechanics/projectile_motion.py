"""
Projectile motion over flat ground without drag.

Launch angle θ in radians, measured from the horizontal. Gravity g is
positive downward and defaults to standard gravity.
"""

import math

from ..core.constants import G0
from ..core.validation import require_positive


def horizontal_velocity(initial_velocity: float, launch_angle: float) -> float:
    return initial_velocity * math.cos(launch_angle)


def vertical_velocity(initial_velocity: float, launch_angle: float) -> float:
    return initial_velocity * math.sin(launch_angle)


def time_of_flight(initial_velocity: float, launch_angle: float, gravity: float = G0) -> float:
    """T = 2 v sin θ / g (launch and landing at the same height)."""
    require_positive(gravity, "gravity")
    return 2.0 * initial_velocity * math.sin(launch_angle) / gravity


def max_height(initial_velocity: float, launch_angle: float, gravity: float = G0) -> float:
    """H = v² sin²θ / (2 g)."""
    require_positive(gravity, "gravity")
    s = math.sin(launch_angle)
    return initial_velocity * initial_velocity * s * s / (2.0 * gravity)


def fly_range(initial_velocity: float, launch_angle: float, gravity: float = G0) -> float:
    """R = v² sin 2θ / g."""
    require_positive(gravity, "gravity")
    return initial_velocity * initial_velocity * math.sin(2.0 * launch_angle) / gravity


def time_to_max_height(initial_velocity: float, launch_angle: float, gravity: float = G0) -> float:
    require_positive(gravity, "gravity")
    return initial_velocity * math.sin(launch_angle) / gravity


def position_x(time: float, initial_velocity: float, launch_angle: float) -> float:
    return initial_velocity * math.cos(launch_angle) * time


def position_y(
    time: float,
    initial_velocity: float,
    launch_angle: float,
    start_y: float = 0.0,
    gravity: float = G0
) -> float:
    """y(t) = y0 + v sin θ t - g t² / 2."""
    return start_y + initial_velocity * math.sin(launch_angle) * time - 0.5 * gravity * time * time


def trajectory_y(
    initial_velocity: float,
    launch_angle: float,
    x: float,
    start_y: float = 0.0,
    gravity: float = G0
) -> float:
    """
    Height of the trajectory at horizontal distance x.

        y(x) = y0 + x tan θ - g x² / (2 v² cos²θ)

    Raises:
        DomainError: If initial_velocity <= 0
    """
    require_positive(initial_velocity, "initial_velocity")
    c = math.cos(launch_angle)
    return (start_y + x * math.tan(launch_angle)
            - gravity * x * x / (2.0 * initial_velocity * initial_velocity * c * c))
