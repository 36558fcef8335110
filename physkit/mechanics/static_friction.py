"""
Static (Coulomb) friction.

The static friction force adjusts to the applied tangential force up to
the limit F_s,max = μs N.
"""

import math

from ..core.validation import require_non_negative, require_positive


def max_static_friction(normal_force: float, mu_static: float) -> float:
    """F_s,max = μs N."""
    require_non_negative(normal_force, "normal_force")
    require_non_negative(mu_static, "mu_static", label="Coefficient of static friction")
    return mu_static * normal_force


def is_slip_occurring(applied_force: float, normal_force: float, mu_static: float) -> bool:
    """True if |F| exceeds the static friction limit."""
    return abs(applied_force) > max_static_friction(normal_force, mu_static)


def can_prevent_slip(applied_force: float, normal_force: float, mu_static: float) -> bool:
    return abs(applied_force) <= max_static_friction(normal_force, mu_static)


def required_mu_static_to_prevent_slip(applied_force: float, normal_force: float) -> float:
    """Smallest μs that holds the body: |F| / N (N > 0)."""
    require_positive(normal_force, "normal_force")
    return abs(applied_force / normal_force)


def static_friction_force(applied_force: float, normal_force: float, mu_static: float) -> float:
    """
    Friction force acting on the body.

    Magnitude min(|F|, μs N), direction opposite to the applied force.
    A zero applied force gives zero friction.
    """
    limit = max_static_friction(normal_force, mu_static)
    if applied_force == 0.0:
        return 0.0
    return -math.copysign(min(abs(applied_force), limit), applied_force)
