"""
Support reactions and internal forces of a straight beam.

Sign convention:
    - Point loads and UDL intensities are positive downward
    - Reactions are positive upward
    - Internal forces at x are the resultants of everything strictly to the
      left of x (left-limit convention): a load located exactly at x is not
      yet counted

Two-support beam (supports at a and b):
    R_B = ΣF_i (x_i - a) / (b - a)
    R_A = ΣF_i - R_B

Uniform distributed loads (UDL) are (intensity, start, end) triples. For
the reactions each segment is replaced by its resultant q (end - start)
acting at the segment midpoint.
"""

import logging
from typing import Iterable, Sequence

import numpy as np
from numba import jit

from ..core.types import DomainError, PointLoad, Reactions
from ..core.validation import (
    as_float_array,
    as_vector_array,
    require_present,
    require_same_length,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Numba Kernels
# =============================================================================

@jit(nopython=True, cache=True)
def _udl_shear(x: float, intensity: float, start: float, end: float) -> float:
    """Portion of a UDL resultant lying left of x."""
    if x <= start:
        return 0.0
    if x >= end:
        return intensity * (end - start)
    return intensity * (x - start)


@jit(nopython=True, cache=True)
def _udl_moment(x: float, intensity: float, start: float, end: float) -> float:
    """Moment about x of the UDL portion lying left of x."""
    if x <= start:
        return 0.0
    if x >= end:
        length = end - start
        return intensity * length * (x - 0.5 * (start + end))
    a = x - start
    return 0.5 * intensity * a * a


@jit(nopython=True, cache=True)
def _section_forces(
    x: float,
    reaction_a: float,
    reaction_b: float,
    support_a: float,
    support_b: float,
    loads: np.ndarray,
    positions: np.ndarray,
    udls: np.ndarray
):
    """
    Shear force and bending moment at section x.

    Args:
        x: Section position
        reaction_a, reaction_b: Support reactions (positive upward)
        support_a, support_b: Support positions
        loads: Point loads, shape (n,)
        positions: Point load positions, shape (n,)
        udls: UDL segments, shape (m, 3) as (intensity, start, end)

    Returns:
        Tuple (V(x), M(x))
    """
    shear = 0.0
    moment = 0.0

    if support_a < x:
        shear += reaction_a
        moment += reaction_a * (x - support_a)
    if support_b < x:
        shear += reaction_b
        moment += reaction_b * (x - support_b)

    for i in range(loads.shape[0]):
        if positions[i] < x:
            shear -= loads[i]
            moment -= loads[i] * (x - positions[i])

    for j in range(udls.shape[0]):
        q = udls[j, 0]
        start = udls[j, 1]
        end = udls[j, 2]
        shear -= _udl_shear(x, q, start, end)
        moment -= _udl_moment(x, q, start, end)

    return shear, moment


@jit(nopython=True, cache=True)
def _section_diagrams(
    xs: np.ndarray,
    reaction_a: float,
    reaction_b: float,
    support_a: float,
    support_b: float,
    loads: np.ndarray,
    positions: np.ndarray,
    udls: np.ndarray
):
    """Evaluate shear and moment at every x, keeping input order."""
    n = xs.shape[0]
    shear = np.empty(n)
    moment = np.empty(n)
    for k in range(n):
        v, m = _section_forces(
            xs[k], reaction_a, reaction_b, support_a, support_b,
            loads, positions, udls
        )
        shear[k] = v
        moment[k] = m
    return shear, moment


# =============================================================================
# Input Preparation
# =============================================================================

def _point_loads(loads, positions, load_name: str, position_name: str):
    require_present(loads, load_name)
    require_present(positions, position_name)
    f = as_float_array(loads, load_name, allow_empty=True)
    x = as_float_array(positions, position_name, allow_empty=True)
    require_same_length(f, x, load_name, position_name)
    return f, x


def _udl_segments(udl_segments) -> np.ndarray:
    require_present(udl_segments, "udl_segments")
    segments = as_vector_array(udl_segments, 3, "udl_segments", allow_empty=True)
    if np.any(segments[:, 2] < segments[:, 1]):
        raise DomainError(
            "UDL segment end must be greater than or equal to start.", "udl_segments"
        )
    return segments


def _require_distinct_supports(support_a: float, support_b: float) -> None:
    if support_a == support_b:
        raise DomainError(
            "Support positions must be different (support_a != support_b).", "support_b"
        )


# =============================================================================
# Reactions
# =============================================================================

def single_support_reaction_1d(loads: Iterable[float]) -> float:
    """Reaction of a single support (or fixed end) carrying all loads: ΣF."""
    return float(np.sum(as_float_array(loads, "loads", allow_empty=True)))


def two_support_reactions_1d(
    loads: Iterable[float],
    positions: Iterable[float],
    support_a: float,
    support_b: float
) -> Reactions:
    """
    Reactions of a simply supported beam under point loads.

    Args:
        loads: Point loads (positive downward)
        positions: x-positions of the loads
        support_a: Position of support A
        support_b: Position of support B (must differ from A)

    Returns:
        Reactions(reaction_a, reaction_b), positive upward

    Example:
        Load 10 at x=2, supports at 0 and 4 -> Reactions(5.0, 5.0)
    """
    return support_reactions_with_udl_1d(loads, positions, [], support_a, support_b)


def distributed_load_to_point_load_uniform(intensity: float, start: float, end: float) -> PointLoad:
    """
    Resultant of a uniform distributed load.

    Returns:
        PointLoad(force=q (end - start), position=(start + end) / 2)
    """
    if end < start:
        raise DomainError("End must be greater than or equal to start.", "end")
    return PointLoad(intensity * (end - start), 0.5 * (start + end))


def support_reactions_with_udl_1d(
    point_loads: Iterable[float],
    point_positions: Iterable[float],
    udl_segments: Iterable[Sequence[float]],
    support_a: float,
    support_b: float
) -> Reactions:
    """
    Reactions of a simply supported beam under point loads and UDLs.

    Args:
        point_loads: Point loads (positive downward)
        point_positions: x-positions of the point loads
        udl_segments: (intensity, start, end) triples, e.g. UniformLoad
        support_a: Position of support A
        support_b: Position of support B (must differ from A)

    Returns:
        Reactions(reaction_a, reaction_b)
    """
    loads, positions = _point_loads(point_loads, point_positions, "point_loads", "point_positions")
    segments = _udl_segments(udl_segments)
    _require_distinct_supports(support_a, support_b)

    udl_forces = segments[:, 0] * (segments[:, 2] - segments[:, 1])
    udl_positions = 0.5 * (segments[:, 1] + segments[:, 2])

    total_load = float(np.sum(loads) + np.sum(udl_forces))
    moment_about_a = float(
        np.sum(loads * (positions - support_a))
        + np.sum(udl_forces * (udl_positions - support_a))
    )

    reaction_b = moment_about_a / (support_b - support_a)
    reaction_a = total_load - reaction_b
    logger.debug(
        "Beam reactions solved: R_A=%g at x=%g, R_B=%g at x=%g (total load %g)",
        reaction_a, support_a, reaction_b, support_b, total_load
    )
    return Reactions(reaction_a, reaction_b)


# =============================================================================
# Internal Forces
# =============================================================================

def normal_force_at_x(
    x: float,
    reaction_axial: float,
    axial_loads: Iterable[float],
    axial_positions: Iterable[float]
) -> float:
    """N(x) = R_axial - Σ axial loads strictly left of x."""
    loads, positions = _point_loads(axial_loads, axial_positions, "axial_loads", "axial_positions")
    return reaction_axial - float(np.sum(loads[positions < x]))


def shear_force_at_x(
    x: float,
    reaction_a: float,
    reaction_b: float,
    support_a: float,
    support_b: float,
    point_loads: Iterable[float],
    point_positions: Iterable[float],
    udl_segments: Iterable[Sequence[float]]
) -> float:
    """
    Shear force V(x) from the resultants left of x.

    With load 10 at x=2 and reactions 5/5 at x=0 and x=4, V(2) = 5 because
    the load at x=2 is not yet counted.
    """
    loads, positions = _point_loads(point_loads, point_positions, "point_loads", "point_positions")
    segments = _udl_segments(udl_segments)
    shear, _ = _section_forces(
        float(x), float(reaction_a), float(reaction_b), float(support_a), float(support_b),
        loads, positions, segments
    )
    return float(shear)


def bending_moment_at_x(
    x: float,
    reaction_a: float,
    reaction_b: float,
    support_a: float,
    support_b: float,
    point_loads: Iterable[float],
    point_positions: Iterable[float],
    udl_segments: Iterable[Sequence[float]]
) -> float:
    """Bending moment M(x) from the resultants left of x (sagging positive)."""
    loads, positions = _point_loads(point_loads, point_positions, "point_loads", "point_positions")
    segments = _udl_segments(udl_segments)
    _, moment = _section_forces(
        float(x), float(reaction_a), float(reaction_b), float(support_a), float(support_b),
        loads, positions, segments
    )
    return float(moment)


def _diagrams(xs, reaction_a, reaction_b, support_a, support_b,
              point_loads, point_positions, udl_segments):
    require_present(xs, "xs")
    x = as_float_array(xs, "xs", allow_empty=True)
    loads, positions = _point_loads(point_loads, point_positions, "point_loads", "point_positions")
    segments = _udl_segments(udl_segments)
    return _section_diagrams(
        x, float(reaction_a), float(reaction_b), float(support_a), float(support_b),
        loads, positions, segments
    )


def shear_diagram(
    xs: Iterable[float],
    reaction_a: float,
    reaction_b: float,
    support_a: float,
    support_b: float,
    point_loads: Iterable[float],
    point_positions: Iterable[float],
    udl_segments: Iterable[Sequence[float]]
) -> np.ndarray:
    """
    Shear force at each x, in the order given (xs need not be sorted).

    Returns:
        Array of V(x_i); empty when xs is empty
    """
    shear, _ = _diagrams(xs, reaction_a, reaction_b, support_a, support_b,
                         point_loads, point_positions, udl_segments)
    return shear


def moment_diagram(
    xs: Iterable[float],
    reaction_a: float,
    reaction_b: float,
    support_a: float,
    support_b: float,
    point_loads: Iterable[float],
    point_positions: Iterable[float],
    udl_segments: Iterable[Sequence[float]]
) -> np.ndarray:
    """Bending moment at each x, in the order given."""
    _, moment = _diagrams(xs, reaction_a, reaction_b, support_a, support_b,
                          point_loads, point_positions, udl_segments)
    return moment
