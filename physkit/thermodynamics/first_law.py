"""
First law of thermodynamics for closed systems.

    ΔU = Q - W

Sign convention: Q > 0 is heat added to the system, W > 0 is work done
by the system on its surroundings.
"""

from ..core.constants import DEFAULT_TOLERANCE
from ..core.validation import require_tolerance


def internal_energy_change(heat: float, work: float) -> float:
    """ΔU = Q - W."""
    return heat - work


def heat_from_energy_balance(internal_energy_change: float, work: float) -> float:
    """Q = ΔU + W."""
    return internal_energy_change + work


def work_from_energy_balance(internal_energy_change: float, heat: float) -> float:
    """W = Q - ΔU."""
    return heat - internal_energy_change


def closed_system_energy_balance(
    initial_internal_energy: float,
    final_internal_energy: float,
    heat: float,
    work: float
) -> float:
    """
    Residual of the closed-system energy balance.

        r = (U2 - U1) - (Q - W)

    Zero for a process that satisfies the first law.
    """
    return (final_internal_energy - initial_internal_energy) - (heat - work)


def is_energy_balanced(
    initial_internal_energy: float,
    final_internal_energy: float,
    heat: float,
    work: float,
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """True if |closed_system_energy_balance| <= tolerance."""
    require_tolerance(tolerance, allow_zero=True)
    residual = closed_system_energy_balance(
        initial_internal_energy, final_internal_energy, heat, work
    )
    return abs(residual) <= tolerance
