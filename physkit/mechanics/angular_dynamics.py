"""Rotational dynamics of rigid bodies about a fixed axis."""

from ..core.validation import require_non_negative, require_non_zero


def linear_inertia(mass: float) -> float:
    """Translational inertia is the mass itself (m >= 0)."""
    require_non_negative(mass, "mass")
    return mass


def moment_of_inertia_point(mass: float, radius: float) -> float:
    """I = m r² for a point mass at distance r from the axis."""
    require_non_negative(mass, "mass")
    require_non_negative(radius, "radius")
    return mass * radius * radius


def parallel_axis_theorem(central_inertia: float, mass: float, distance: float) -> float:
    """
    Steiner's theorem I = I_c + m d².

    Args:
        central_inertia: Moment of inertia about the parallel axis through the centre of mass
        mass: Body mass
        distance: Distance between the two axes

    Returns:
        Moment of inertia about the shifted axis
    """
    require_non_negative(central_inertia, "central_inertia")
    require_non_negative(mass, "mass")
    require_non_negative(distance, "distance")
    return central_inertia + mass * distance * distance


def angular_acceleration(torque: float, moment_of_inertia: float) -> float:
    """α = τ / I, I > 0."""
    require_non_zero(moment_of_inertia, "moment_of_inertia")
    require_non_negative(moment_of_inertia, "moment_of_inertia")
    return torque / moment_of_inertia


def rotational_kinetic_energy(moment_of_inertia: float, angular_velocity: float) -> float:
    """E = I ω² / 2."""
    require_non_negative(moment_of_inertia, "moment_of_inertia")
    return 0.5 * moment_of_inertia * angular_velocity * angular_velocity
