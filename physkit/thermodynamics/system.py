"""
Thermodynamic system classification and process checks.

Exchange permissions by system boundary:

    | System   | Mass | Energy | Heat | Work |
    |----------|------|--------|------|------|
    | OPEN     | yes  | yes    | yes  | yes  |
    | CLOSED   | no   | yes    | yes  | yes  |
    | ISOLATED | no   | no     | no   | no   |
"""

import logging
from typing import Dict, Iterable

import numpy as np

from ..core.types import DomainError, ProcessType, SystemType
from ..core.validation import as_float_array, require_tolerance

logger = logging.getLogger(__name__)


# (mass, energy, heat, work)
_EXCHANGE: Dict[SystemType, tuple] = {
    SystemType.OPEN: (True, True, True, True),
    SystemType.CLOSED: (False, True, True, True),
    SystemType.ISOLATED: (False, False, False, False),
}


def _exchange(system_type: SystemType) -> tuple:
    try:
        return _EXCHANGE[system_type]
    except (KeyError, TypeError):
        raise DomainError(f"Unknown system type: {system_type!r}", "system_type") from None


# =============================================================================
# Boundary Exchange
# =============================================================================

def is_mass_exchange_allowed(system_type: SystemType) -> bool:
    return _exchange(system_type)[0]


def is_energy_exchange_allowed(system_type: SystemType) -> bool:
    return _exchange(system_type)[1]


def is_heat_exchange_allowed(system_type: SystemType) -> bool:
    return _exchange(system_type)[2]


def is_work_exchange_allowed(system_type: SystemType) -> bool:
    return _exchange(system_type)[3]


# =============================================================================
# Process Constraints
# =============================================================================

def is_process_constraint_satisfied(
    process: ProcessType,
    p1: float,
    p2: float,
    v1: float,
    v2: float,
    t1: float,
    t2: float,
    tolerance: float
) -> bool:
    """
    Check that a state change honours the defining constraint of a process.

    Args:
        process: Process to test
        p1, p2: Initial and final pressure
        v1, v2: Initial and final volume
        t1, t2: Initial and final temperature
        tolerance: Absolute tolerance (>= 0)

    Returns:
        True if the held-constant variable changed by at most tolerance.
        ADIABATIC always returns True: heat is not part of the state
        variables passed in, so it cannot be checked here.
    """
    require_tolerance(tolerance, allow_zero=True)

    if process is ProcessType.ISOTHERMAL:
        return abs(t1 - t2) <= tolerance
    if process is ProcessType.ISOBARIC:
        return abs(p1 - p2) <= tolerance
    if process is ProcessType.ISOCHORIC:
        return abs(v1 - v2) <= tolerance
    if process is ProcessType.ADIABATIC:
        logger.debug("Adiabatic constraint accepted without a heat term")
        return True
    raise DomainError(f"Unknown process type: {process!r}", "process")


# =============================================================================
# Equilibrium
# =============================================================================

def is_equilibrium_by_rates(
    temperature_rate: float,
    pressure_rate: float,
    volume_rate: float,
    tolerance: float
) -> bool:
    """
    Quasi-equilibrium test: |dT/dt|, |dp/dt| and |dV/dt| all within tolerance.
    """
    require_tolerance(tolerance, allow_zero=True)
    return (abs(temperature_rate) <= tolerance
            and abs(pressure_rate) <= tolerance
            and abs(volume_rate) <= tolerance)


def is_equilibrium_by_spread(temperatures: Iterable[float], tolerance: float) -> bool:
    """Thermal equilibrium: max(T) - min(T) <= tolerance over all subsystems."""
    data = as_float_array(temperatures, "temperatures")
    require_tolerance(tolerance, allow_zero=True)
    return float(np.max(data) - np.min(data)) <= tolerance
