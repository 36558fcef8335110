"""
Ideal gas equation of state.

    p V = n R T = m R_s T

where R is the universal gas constant and R_s = R / M the specific gas
constant of the gas. SI units throughout: Pa, m³, K, mol, kg, J/(kg·K).
"""

from ..core.constants import GAS_CONSTANT
from ..core.validation import require_non_negative, require_positive

_T = "Temperature in Kelvins"
_RS = "Specific gas constant"
_N = "Amount of substance"


# =============================================================================
# Pressure, Temperature, Volume
# =============================================================================

def pressure_from_mass(mass: float, specific_gas_constant: float, temperature: float, volume: float) -> float:
    """p = m R_s T / V."""
    require_non_negative(mass, "mass")
    require_positive(specific_gas_constant, "specific_gas_constant", label=_RS)
    require_non_negative(temperature, "temperature", label=_T)
    require_positive(volume, "volume")
    return mass * specific_gas_constant * temperature / volume


def pressure_from_moles(amount_of_substance: float, temperature: float, volume: float) -> float:
    """
    p = n R T / V.

    Example:
        1 mol at 273.15 K in 22.4 L -> ~101325 Pa
    """
    require_non_negative(amount_of_substance, "amount_of_substance", label=_N)
    require_non_negative(temperature, "temperature", label=_T)
    require_positive(volume, "volume")
    return amount_of_substance * GAS_CONSTANT * temperature / volume


def temperature_from_mass(pressure: float, volume: float, mass: float, specific_gas_constant: float) -> float:
    """T = p V / (m R_s)."""
    require_positive(pressure, "pressure")
    require_positive(volume, "volume")
    require_positive(mass, "mass")
    require_positive(specific_gas_constant, "specific_gas_constant", label=_RS)
    return pressure * volume / (mass * specific_gas_constant)


def temperature_from_moles(pressure: float, volume: float, amount_of_substance: float) -> float:
    """T = p V / (n R)."""
    require_positive(pressure, "pressure")
    require_positive(volume, "volume")
    require_positive(amount_of_substance, "amount_of_substance", label=_N)
    return pressure * volume / (amount_of_substance * GAS_CONSTANT)


def volume_from_mass(mass: float, specific_gas_constant: float, temperature: float, pressure: float) -> float:
    """V = m R_s T / p."""
    require_non_negative(mass, "mass")
    require_positive(specific_gas_constant, "specific_gas_constant", label=_RS)
    require_non_negative(temperature, "temperature", label=_T)
    require_positive(pressure, "pressure")
    return mass * specific_gas_constant * temperature / pressure


def volume_from_moles(amount_of_substance: float, temperature: float, pressure: float) -> float:
    """V = n R T / p."""
    require_positive(amount_of_substance, "amount_of_substance", label=_N)
    require_non_negative(temperature, "temperature", label=_T)
    require_positive(pressure, "pressure")
    return amount_of_substance * GAS_CONSTANT * temperature / pressure


# =============================================================================
# Amount of Gas
# =============================================================================

def moles_from_state(pressure: float, volume: float, temperature: float) -> float:
    """n = p V / (R T)."""
    require_non_negative(pressure, "pressure")
    require_positive(volume, "volume")
    require_positive(temperature, "temperature", label=_T)
    return pressure * volume / (GAS_CONSTANT * temperature)


def mass_from_state(pressure: float, volume: float, specific_gas_constant: float, temperature: float) -> float:
    """m = p V / (R_s T)."""
    require_non_negative(pressure, "pressure")
    require_positive(volume, "volume")
    require_positive(specific_gas_constant, "specific_gas_constant", label=_RS)
    require_positive(temperature, "temperature", label=_T)
    return pressure * volume / (specific_gas_constant * temperature)


def moles_from_mass(mass: float, molar_mass: float) -> float:
    """n = m / M."""
    require_non_negative(mass, "mass")
    require_positive(molar_mass, "molar_mass")
    return mass / molar_mass


def mass_from_moles(amount_of_substance: float, molar_mass: float) -> float:
    require_non_negative(amount_of_substance, "amount_of_substance", label=_N)
    require_positive(molar_mass, "molar_mass")
    return amount_of_substance * molar_mass


def specific_gas_constant_from_molar_mass(molar_mass: float) -> float:
    """
    R_s = R / M.

    Args:
        molar_mass: Molar mass in kg/mol (air: 0.0289647)

    Returns:
        Specific gas constant in J/(kg·K) (air: ~287.05)
    """
    require_positive(molar_mass, "molar_mass")
    return GAS_CONSTANT / molar_mass


# =============================================================================
# Density
# =============================================================================

def density_from_state(pressure: float, specific_gas_constant: float, temperature: float) -> float:
    """ρ = p / (R_s T)."""
    require_non_negative(pressure, "pressure")
    require_positive(specific_gas_constant, "specific_gas_constant", label=_RS)
    require_positive(temperature, "temperature", label=_T)
    return pressure / (specific_gas_constant * temperature)


def pressure_from_density(density: float, specific_gas_constant: float, temperature: float) -> float:
    """p = ρ R_s T."""
    require_non_negative(density, "density")
    require_positive(specific_gas_constant, "specific_gas_constant", label=_RS)
    require_non_negative(temperature, "temperature", label=_T)
    return density * specific_gas_constant * temperature
