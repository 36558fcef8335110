"""
Work done by gravity and friction.

Friction always opposes motion, so the work it does is non-positive.
"""

import math

from ..core.constants import G0
from ..core.validation import require_non_negative


def work_of_gravity_from_height_change(mass: float, delta_height: float, g: float = G0) -> float:
    """
    W_g = -m g Δh.

    Lifting (Δh > 0) gives negative work, lowering gives positive work.
    """
    require_non_negative(mass, "mass")
    require_non_negative(g, "g", label="Gravity")
    return -mass * g * delta_height


def work_of_friction_from_force(friction_force_magnitude: float, distance: float) -> float:
    """W_f = -F_f d."""
    require_non_negative(friction_force_magnitude, "friction_force_magnitude", label="Friction force magnitude")
    require_non_negative(distance, "distance")
    return -friction_force_magnitude * distance


def work_of_kinetic_friction(mu: float, normal_force: float, distance: float) -> float:
    """W_f = -μ N d."""
    require_non_negative(mu, "mu", label="Friction coefficient")
    require_non_negative(normal_force, "normal_force")
    require_non_negative(distance, "distance")
    return -(mu * normal_force) * distance


def work_of_kinetic_friction_horizontal(mu: float, mass: float, distance: float, g: float = G0) -> float:
    """W_f = -μ m g d on a horizontal surface."""
    require_non_negative(mu, "mu", label="Friction coefficient")
    require_non_negative(mass, "mass")
    require_non_negative(distance, "distance")
    require_non_negative(g, "g", label="Gravity")
    return -(mu * mass * g) * distance


def max_static_friction_force(mu_static: float, normal_force: float) -> float:
    require_non_negative(mu_static, "mu_static", label="Friction coefficient")
    require_non_negative(normal_force, "normal_force")
    return mu_static * normal_force


def work_of_kinetic_friction_incline(
    mu: float,
    mass: float,
    distance: float,
    incline_angle: float,
    g: float = G0
) -> float:
    """
    Friction work along an incline.

        W_f = -μ m g cos θ d

    Args:
        mu: Kinetic friction coefficient
        mass: Body mass
        distance: Distance travelled along the slope
        incline_angle: Slope angle, radians
        g: Gravitational acceleration

    Returns:
        Work in J (non-positive for θ within ±90°)
    """
    require_non_negative(mu, "mu", label="Friction coefficient")
    require_non_negative(mass, "mass")
    require_non_negative(distance, "distance")
    require_non_negative(g, "g", label="Gravity")
    normal_force = mass * g * math.cos(incline_angle)
    return -(mu * normal_force) * distance
