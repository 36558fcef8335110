"""
Weighted centres: centre of mass, centroid, centre of gravity, resultant location.

All interpretations reduce to the same weighted average

    x_c = Σ(w_i · x_i) / Σw_i

evaluated per coordinate. The weight meaning differs:
    - centre of mass / centroid: weights are masses or areas (w >= 0)
    - centre of gravity / resultant location: weights are signed forces

Non-negative mode rejects negative weights; both modes reject a zero total.
"""

from typing import Iterable, Sequence

import numpy as np
from numba import jit

from ..core.types import DomainError, SequenceLengthError, UndefinedResultError, Vec2, Vec3
from ..core.validation import as_float_array, as_vector_array, require_present


# =============================================================================
# Numba Kernel
# =============================================================================

@jit(nopython=True, cache=True)
def _weighted_sums(weights: np.ndarray, positions: np.ndarray):
    """
    Weighted coordinate sums.

    Args:
        weights: Weights w_i, shape (n,)
        positions: Coordinates, shape (n, dim)

    Returns:
        Tuple (Σ w_i x_i per axis with shape (dim,), Σ w_i)
    """
    n, dim = positions.shape
    sums = np.zeros(dim)
    total = 0.0
    for i in range(n):
        w = weights[i]
        total += w
        for j in range(dim):
            sums[j] += w * positions[i, j]
    return sums, total


# =============================================================================
# Generic Core
# =============================================================================

_LENGTH_MESSAGE = "Arrays must have the same length."


def _solve(
    weights: Iterable[float],
    positions: np.ndarray,
    signed: bool,
    weight_name: str,
    negative_message: str,
    zero_message: str
) -> np.ndarray:
    w = as_float_array(weights, weight_name, allow_empty=True)
    if w.size == 0 or positions.shape[0] == 0:
        raise SequenceLengthError("Array must not be empty.", weight_name)
    if w.size != positions.shape[0]:
        raise SequenceLengthError(_LENGTH_MESSAGE, "positions")
    if not signed and np.any(w < 0.0):
        raise DomainError(negative_message, weight_name)

    sums, total = _weighted_sums(w, positions)
    if total == 0.0:
        if signed:
            raise UndefinedResultError(zero_message, weight_name)
        raise DomainError(zero_message, weight_name)
    return sums / total


def _positions_1d(positions: Sequence[float]) -> np.ndarray:
    return as_float_array(positions, "positions", allow_empty=True).reshape(-1, 1)


_DEFAULT_NEGATIVE = "Weights must be non-negative."
_DEFAULT_ZERO = "Total weight must be greater than zero. Centroid is undefined."
_DEFAULT_ZERO_SIGNED = "Total weight must be non-zero. Center of gravity is undefined."


def _messages(signed: bool) -> tuple:
    return (_DEFAULT_NEGATIVE, _DEFAULT_ZERO_SIGNED if signed else _DEFAULT_ZERO)


def weighted_center_1d(
    weights: Iterable[float],
    positions: Iterable[float],
    signed: bool = False
) -> float:
    """
    Weighted average of scalar positions.

    Args:
        weights: w_i; must be >= 0 unless signed
        positions: x_i, same length as weights
        signed: Accept weights of any sign

    Returns:
        Σ(w x) / Σw

    Raises:
        SequenceLengthError: Empty input or length mismatch
        DomainError: Negative weight or zero total (non-negative mode)
        UndefinedResultError: Zero total in signed mode
    """
    require_present(weights, "weights")
    require_present(positions, "positions")
    center = _solve(weights, _positions_1d(positions), signed, "weights", *_messages(signed))
    return float(center[0])


def weighted_center_2d(
    weights: Iterable[float],
    positions: Iterable[Sequence[float]],
    signed: bool = False
) -> Vec2:
    """Weighted average of 2D positions, per component."""
    require_present(weights, "weights")
    coords = as_vector_array(positions, 2, "positions", allow_empty=True)
    center = _solve(weights, coords, signed, "weights", *_messages(signed))
    return Vec2(float(center[0]), float(center[1]))


def weighted_center_3d(
    weights: Iterable[float],
    positions: Iterable[Sequence[float]],
    signed: bool = False
) -> Vec3:
    """Weighted average of 3D positions, per component."""
    require_present(weights, "weights")
    coords = as_vector_array(positions, 3, "positions", allow_empty=True)
    center = _solve(weights, coords, signed, "weights", *_messages(signed))
    return Vec3(float(center[0]), float(center[1]), float(center[2]))


# =============================================================================
# Centre of Mass
# =============================================================================

_MASS_NEGATIVE = "Mass must be non-negative."
_MASS_ZERO = "Total mass must be greater than zero. Center of mass is undefined."


def center_of_mass_1d(masses: Iterable[float], positions: Iterable[float]) -> float:
    """x_cm = Σ(m x) / Σm."""
    require_present(masses, "masses")
    require_present(positions, "positions")
    center = _solve(masses, _positions_1d(positions), False, "masses", _MASS_NEGATIVE, _MASS_ZERO)
    return float(center[0])


def center_of_mass_2d(masses: Iterable[float], positions: Iterable[Sequence[float]]) -> Vec2:
    require_present(masses, "masses")
    coords = as_vector_array(positions, 2, "positions", allow_empty=True)
    center = _solve(masses, coords, False, "masses", _MASS_NEGATIVE, _MASS_ZERO)
    return Vec2(float(center[0]), float(center[1]))


def center_of_mass_3d(masses: Iterable[float], positions: Iterable[Sequence[float]]) -> Vec3:
    require_present(masses, "masses")
    coords = as_vector_array(positions, 3, "positions", allow_empty=True)
    center = _solve(masses, coords, False, "masses", _MASS_NEGATIVE, _MASS_ZERO)
    return Vec3(float(center[0]), float(center[1]), float(center[2]))


# Uniform gravity field: centre of gravity coincides with centre of mass
center_of_gravity_from_masses_1d = center_of_mass_1d
center_of_gravity_from_masses_2d = center_of_mass_2d
center_of_gravity_from_masses_3d = center_of_mass_3d


# =============================================================================
# Centroid (areas, lengths, volumes)
# =============================================================================

def centroid_1d(weights: Iterable[float], centroid_positions: Iterable[float]) -> float:
    """Composite centroid from part sizes (areas, lengths, volumes) and part centroids."""
    return weighted_center_1d(weights, centroid_positions)


def centroid_2d(weights: Iterable[float], centroid_positions: Iterable[Sequence[float]]) -> Vec2:
    return weighted_center_2d(weights, centroid_positions)


def centroid_3d(weights: Iterable[float], centroid_positions: Iterable[Sequence[float]]) -> Vec3:
    return weighted_center_3d(weights, centroid_positions)


# =============================================================================
# Centre of Gravity and Resultant Location (signed)
# =============================================================================

def center_of_gravity_1d(weights: Iterable[float], positions: Iterable[float]) -> float:
    """Centre of gravity from signed weight forces W_i at x_i."""
    return weighted_center_1d(weights, positions, signed=True)


def center_of_gravity_2d(weights: Iterable[float], positions: Iterable[Sequence[float]]) -> Vec2:
    return weighted_center_2d(weights, positions, signed=True)


def center_of_gravity_3d(weights: Iterable[float], positions: Iterable[Sequence[float]]) -> Vec3:
    return weighted_center_3d(weights, positions, signed=True)


_FORCE_ZERO = "Total force must be non-zero. Resultant location is undefined."


def resultant_location_1d(forces: Iterable[float], positions: Iterable[float]) -> float:
    """
    Point of application of the resultant of parallel forces.

    x_R = Σ(F x) / ΣF
    """
    require_present(forces, "forces")
    require_present(positions, "positions")
    center = _solve(forces, _positions_1d(positions), True, "forces", _DEFAULT_NEGATIVE, _FORCE_ZERO)
    return float(center[0])


def resultant_location_2d(forces: Iterable[float], positions: Iterable[Sequence[float]]) -> Vec2:
    require_present(forces, "forces")
    coords = as_vector_array(positions, 2, "positions", allow_empty=True)
    center = _solve(forces, coords, True, "forces", _DEFAULT_NEGATIVE, _FORCE_ZERO)
    return Vec2(float(center[0]), float(center[1]))


def resultant_location_3d(forces: Iterable[float], positions: Iterable[Sequence[float]]) -> Vec3:
    require_present(forces, "forces")
    coords = as_vector_array(positions, 3, "positions", allow_empty=True)
    center = _solve(forces, coords, True, "forces", _DEFAULT_NEGATIVE, _FORCE_ZERO)
    return Vec3(float(center[0]), float(center[1]), float(center[2]))
