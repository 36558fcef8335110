"""Classical thermodynamics: first law, ideal gas, state variables, systems."""

from .first_law import (
    internal_energy_change,
    heat_from_energy_balance,
    work_from_energy_balance,
    closed_system_energy_balance,
    is_energy_balanced,
)
from .ideal_gas import (
    pressure_from_mass,
    pressure_from_moles,
    temperature_from_mass,
    temperature_from_moles,
    volume_from_mass,
    volume_from_moles,
    moles_from_state,
    mass_from_state,
    moles_from_mass,
    mass_from_moles,
    specific_gas_constant_from_molar_mass,
    density_from_state,
    pressure_from_density,
)
from .state_variables import (
    density,
    specific_volume,
    density_from_specific_volume,
    specific_volume_from_density,
    mass_from_density,
    volume_from_density,
    volume_from_specific_volume,
    mass_from_specific_volume,
    specific_value,
    total_from_specific,
)
from .system import (
    is_mass_exchange_allowed,
    is_energy_exchange_allowed,
    is_heat_exchange_allowed,
    is_work_exchange_allowed,
    is_process_constraint_satisfied,
    is_equilibrium_by_rates,
    is_equilibrium_by_spread,
)

__all__ = [
    # First law
    "internal_energy_change",
    "heat_from_energy_balance",
    "work_from_energy_balance",
    "closed_system_energy_balance",
    "is_energy_balanced",
    # Ideal gas
    "pressure_from_mass",
    "pressure_from_moles",
    "temperature_from_mass",
    "temperature_from_moles",
    "volume_from_mass",
    "volume_from_moles",
    "moles_from_state",
    "mass_from_state",
    "moles_from_mass",
    "mass_from_moles",
    "specific_gas_constant_from_molar_mass",
    "density_from_state",
    "pressure_from_density",
    # State variables
    "density",
    "specific_volume",
    "density_from_specific_volume",
    "specific_volume_from_density",
    "mass_from_density",
    "volume_from_density",
    "volume_from_specific_volume",
    "mass_from_specific_volume",
    "specific_value",
    "total_from_specific",
    # System
    "is_mass_exchange_allowed",
    "is_energy_exchange_allowed",
    "is_heat_exchange_allowed",
    "is_work_exchange_allowed",
    "is_process_constraint_satisfied",
    "is_equilibrium_by_rates",
    "is_equilibrium_by_spread",
]
