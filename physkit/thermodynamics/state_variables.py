"""
Intensive state variables derived from mass and volume.

    ρ = m / V       (density, kg/m³)
    v = V / m = 1/ρ (specific volume, m³/kg)
"""

from ..core.validation import require_non_negative, require_positive


def density(mass: float, volume: float) -> float:
    require_non_negative(mass, "mass")
    require_positive(volume, "volume")
    return mass / volume


def specific_volume(mass: float, volume: float) -> float:
    require_positive(mass, "mass")
    require_non_negative(volume, "volume")
    return volume / mass


def density_from_specific_volume(specific_volume: float) -> float:
    require_positive(specific_volume, "specific_volume")
    return 1.0 / specific_volume


def specific_volume_from_density(density: float) -> float:
    require_positive(density, "density")
    return 1.0 / density


def mass_from_density(density: float, volume: float) -> float:
    """m = ρ V."""
    require_non_negative(density, "density")
    require_non_negative(volume, "volume")
    return density * volume


def volume_from_density(mass: float, density: float) -> float:
    require_non_negative(mass, "mass")
    require_positive(density, "density")
    return mass / density


def volume_from_specific_volume(mass: float, specific_volume: float) -> float:
    """V = m v."""
    require_non_negative(mass, "mass")
    require_non_negative(specific_volume, "specific_volume")
    return mass * specific_volume


def mass_from_specific_volume(volume: float, specific_volume: float) -> float:
    require_non_negative(volume, "volume")
    require_positive(specific_volume, "specific_volume")
    return volume / specific_volume


def specific_value(total: float, mass: float) -> float:
    """
    Per-unit-mass value of an extensive property (e.g. U -> u, H -> h, S -> s).

    Args:
        total: Extensive quantity
        mass: System mass (> 0)
    """
    require_positive(mass, "mass")
    return total / mass


def total_from_specific(specific: float, mass: float) -> float:
    """Extensive property from its specific value: X = x m."""
    require_non_negative(mass, "mass")
    return specific * mass
