"""
Classical mechanics: kinematics, statics and dynamics.

Submodules are imported as namespaces because several formulas share a
name across topics (e.g. angular_acceleration in both circular_motion and
angular_dynamics).
"""

from . import (
    linear_motion,
    circular_motion,
    projectile_motion,
    center_of_mass,
    equilibrium,
    moments,
    static_friction,
    support_reactions,
    linear_dynamics,
    angular_dynamics,
    circular_dynamics,
    momentum,
    work_energy,
)
from .center_of_mass import (
    weighted_center_1d,
    weighted_center_2d,
    weighted_center_3d,
    center_of_mass_1d,
    center_of_mass_2d,
    center_of_mass_3d,
)
from .equilibrium import (
    is_force_equilibrium_1d,
    is_force_equilibrium_2d,
    is_force_equilibrium_3d,
    is_moment_equilibrium,
    is_static_equilibrium_2d,
)
from .support_reactions import (
    two_support_reactions_1d,
    support_reactions_with_udl_1d,
    shear_force_at_x,
    bending_moment_at_x,
    shear_diagram,
    moment_diagram,
)

__all__ = [
    # Kinematics
    "linear_motion",
    "circular_motion",
    "projectile_motion",
    # Statics
    "center_of_mass",
    "equilibrium",
    "moments",
    "static_friction",
    "support_reactions",
    # Dynamics
    "linear_dynamics",
    "angular_dynamics",
    "circular_dynamics",
    "momentum",
    "work_energy",
    # Weighted centres
    "weighted_center_1d",
    "weighted_center_2d",
    "weighted_center_3d",
    "center_of_mass_1d",
    "center_of_mass_2d",
    "center_of_mass_3d",
    # Equilibrium
    "is_force_equilibrium_1d",
    "is_force_equilibrium_2d",
    "is_force_equilibrium_3d",
    "is_moment_equilibrium",
    "is_static_equilibrium_2d",
    # Beams
    "two_support_reactions_1d",
    "support_reactions_with_udl_1d",
    "shear_force_at_x",
    "bending_moment_at_x",
    "shear_diagram",
    "moment_diagram",
]
