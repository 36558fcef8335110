"""
Static equilibrium checks.

A body is in static equilibrium when the resultant force and the resultant
moment both vanish:
    ΣF = 0,  ΣM = 0

Sums are compared per component against an absolute tolerance. An empty
set of forces is in equilibrium.
"""

from typing import Iterable, Sequence

import numpy as np

from ..core.constants import DEFAULT_TOLERANCE
from ..core.validation import as_float_array, as_vector_array, require_tolerance


def _components_balanced(sums: np.ndarray, tolerance: float) -> bool:
    return bool(np.all(np.abs(sums) <= tolerance))


def is_force_equilibrium_1d(forces: Iterable[float], tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """|ΣF| <= tolerance."""
    data = as_float_array(forces, "forces", allow_empty=True)
    require_tolerance(tolerance)
    return abs(float(np.sum(data))) <= tolerance


def is_force_equilibrium_2d(
    forces: Iterable[Sequence[float]],
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """|ΣFx| <= tolerance and |ΣFy| <= tolerance."""
    data = as_vector_array(forces, 2, "forces", allow_empty=True)
    require_tolerance(tolerance)
    return _components_balanced(data.sum(axis=0), tolerance)


def is_force_equilibrium_3d(
    forces: Iterable[Sequence[float]],
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    data = as_vector_array(forces, 3, "forces", allow_empty=True)
    require_tolerance(tolerance)
    return _components_balanced(data.sum(axis=0), tolerance)


def is_moment_equilibrium(torques: Iterable[float], tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """|ΣM| <= tolerance."""
    data = as_float_array(torques, "torques", allow_empty=True)
    require_tolerance(tolerance)
    return abs(float(np.sum(data))) <= tolerance


def is_static_equilibrium_2d(
    forces: Iterable[Sequence[float]],
    torques: Iterable[float],
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """Planar rigid body: force balance in x and y plus moment balance about z."""
    return (is_force_equilibrium_2d(forces, tolerance)
            and is_moment_equilibrium(torques, tolerance))
