"""
Moments of force and the law of the lever.

    d = r |sin θ|      (lever arm)
    M = F d            (torque)

θ is the angle between the position vector and the force, in radians.
"""

import math
from typing import Iterable

import numpy as np

from ..core.types import UndefinedResultError
from ..core.validation import as_float_array, require_non_negative, require_tolerance


def lever_arm(radius: float, angle: float) -> float:
    """Perpendicular distance r |sin θ|; radius must be non-negative."""
    require_non_negative(radius, "radius")
    return abs(radius * math.sin(angle))


def signed_lever_arm(radius: float, angle: float) -> float:
    """r sin θ; the sign encodes the sense of rotation (counterclockwise positive)."""
    require_non_negative(radius, "radius")
    return radius * math.sin(angle)


def torque(force: float, radius: float, angle: float) -> float:
    """M = F r |sin θ|."""
    return force * lever_arm(radius, angle)


def signed_torque(force: float, radius: float, angle: float) -> float:
    return force * signed_lever_arm(radius, angle)


def torque_from_lever(force: float, lever_arm: float) -> float:
    """M = F d with d already perpendicular to F."""
    return force * lever_arm


def is_lever_in_equilibrium(
    force1: float,
    arm1: float,
    force2: float,
    arm2: float,
    tolerance: float | None = None
) -> bool:
    """
    Law of the lever F1 d1 = F2 d2.

    Args:
        force1, arm1: First force and its lever arm
        force2, arm2: Second force and its lever arm
        tolerance: Absolute tolerance; None compares exactly

    Returns:
        True if both moments balance
    """
    difference = force1 * arm1 - force2 * arm2
    if tolerance is None:
        return difference == 0.0
    require_tolerance(tolerance, allow_zero=True)
    return abs(difference) <= tolerance


def is_rotational_equilibrium(torques: Iterable[float], tolerance: float | None = None) -> bool:
    """ΣM = 0, exactly when tolerance is None."""
    total = float(np.sum(as_float_array(torques, "torques", allow_empty=True)))
    if tolerance is None:
        return total == 0.0
    require_tolerance(tolerance, allow_zero=True)
    return abs(total) <= tolerance


def force_from_lever_law(known_force: float, known_arm: float, unknown_arm: float) -> float:
    """
    Force needed on the unknown arm to balance the lever.

        F2 = F1 d1 / d2

    Raises:
        DomainError: If unknown_arm < 0
        UndefinedResultError: If unknown_arm == 0
    """
    require_non_negative(unknown_arm, "unknown_arm", label="Lever arm")
    if unknown_arm == 0.0:
        raise UndefinedResultError(
            "Lever arm equal to zero means no torque can be produced. Equilibrium is impossible.",
            "unknown_arm"
        )
    return known_force * known_arm / unknown_arm
