"""
Angle conversion, normalization and interpolation.

Degree and radian variants share the same semantics:
    - wrap_*         -> [0, full turn)
    - wrap_*_signed  -> (-half turn, half turn]
    - delta_angle_*  -> shortest signed difference, in (-half, half]
"""

import math

from ..core.constants import ANGLE_TOLERANCE_DEG, ANGLE_TOLERANCE_RAD

TAU = 2.0 * math.pi


def _wrap(angle: float, full_turn: float) -> float:
    wrapped = math.fmod(angle, full_turn)
    if wrapped < 0.0:
        wrapped += full_turn
    # fmod of a tiny negative plus a full turn can round up to the full turn
    if wrapped >= full_turn:
        wrapped = 0.0
    return wrapped


def _wrap_signed(angle: float, full_turn: float) -> float:
    wrapped = _wrap(angle, full_turn)
    if wrapped > full_turn / 2.0:
        wrapped -= full_turn
    return wrapped


# =============================================================================
# Conversion
# =============================================================================

def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


# =============================================================================
# Normalization
# =============================================================================

def wrap_deg(angle_deg: float) -> float:
    """
    Normalize an angle to [0, 360).

    Idempotent: wrap_deg(wrap_deg(a)) == wrap_deg(a).
    """
    return _wrap(angle_deg, 360.0)


def wrap_rad(angle_rad: float) -> float:
    """Normalize an angle to [0, 2π)."""
    return _wrap(angle_rad, TAU)


def wrap_deg_signed(angle_deg: float) -> float:
    """Normalize an angle to (-180, 180]."""
    return _wrap_signed(angle_deg, 360.0)


def wrap_rad_signed(angle_rad: float) -> float:
    """Normalize an angle to (-π, π]."""
    return _wrap_signed(angle_rad, TAU)


# =============================================================================
# Differences and Interpolation
# =============================================================================

def delta_angle_deg(from_deg: float, to_deg: float) -> float:
    """
    Shortest signed rotation from from_deg to to_deg.

    Example:
        delta_angle_deg(350, 10) -> 20
        delta_angle_deg(10, 350) -> -20
    """
    return wrap_deg_signed(to_deg - from_deg)


def delta_angle_rad(from_rad: float, to_rad: float) -> float:
    return wrap_rad_signed(to_rad - from_rad)


def lerp_angle_deg(from_deg: float, to_deg: float, t: float) -> float:
    """
    Interpolate along the shortest arc.

    Args:
        from_deg: Start angle
        to_deg: End angle
        t: Interpolation factor (0 -> from, 1 -> to); not clamped

    Returns:
        Interpolated angle wrapped to [0, 360)
    """
    return wrap_deg(from_deg + delta_angle_deg(from_deg, to_deg) * t)


def lerp_angle_rad(from_rad: float, to_rad: float, t: float) -> float:
    return wrap_rad(from_rad + delta_angle_rad(from_rad, to_rad) * t)


def move_towards_angle_deg(current_deg: float, target_deg: float, max_delta_deg: float) -> float:
    """
    Step current toward target by at most max_delta along the shortest arc.

    A non-positive max_delta, or a target already within reach, returns the
    wrapped target.
    """
    delta = delta_angle_deg(current_deg, target_deg)
    if max_delta_deg <= 0.0 or abs(delta) <= max_delta_deg:
        return wrap_deg(target_deg)
    step = max(-max_delta_deg, min(max_delta_deg, delta))
    return wrap_deg(current_deg + step)


def move_towards_angle_rad(current_rad: float, target_rad: float, max_delta_rad: float) -> float:
    delta = delta_angle_rad(current_rad, target_rad)
    if max_delta_rad <= 0.0 or abs(delta) <= max_delta_rad:
        return wrap_rad(target_rad)
    step = max(-max_delta_rad, min(max_delta_rad, delta))
    return wrap_rad(current_rad + step)


# =============================================================================
# Comparisons
# =============================================================================

def is_angle_between_deg(angle_deg: float, start_deg: float, end_deg: float) -> bool:
    """
    Inclusive test for angle lying on the arc from start to end (counterclockwise).

    Ranges crossing zero (e.g. start=350, end=10) are handled.
    """
    a = wrap_deg(angle_deg)
    start = wrap_deg(start_deg)
    end = wrap_deg(end_deg)
    if start <= end:
        return start <= a <= end
    return a >= start or a <= end


def is_angle_between_rad(angle_rad: float, start_rad: float, end_rad: float) -> bool:
    a = wrap_rad(angle_rad)
    start = wrap_rad(start_rad)
    end = wrap_rad(end_rad)
    if start <= end:
        return start <= a <= end
    return a >= start or a <= end


def approximately_equal_deg(a_deg: float, b_deg: float, tolerance: float = ANGLE_TOLERANCE_DEG) -> bool:
    """True if the shortest difference between a and b is within tolerance."""
    return abs(delta_angle_deg(a_deg, b_deg)) <= tolerance


def approximately_equal_rad(a_rad: float, b_rad: float, tolerance: float = ANGLE_TOLERANCE_RAD) -> bool:
    return abs(delta_angle_rad(a_rad, b_rad)) <= tolerance
