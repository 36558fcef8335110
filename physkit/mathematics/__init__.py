"""Pure mathematics helpers: angles, number sets, combinatorics, statistics, roots."""

from .angles import (
    deg_to_rad,
    rad_to_deg,
    wrap_deg,
    wrap_rad,
    wrap_deg_signed,
    wrap_rad_signed,
    delta_angle_deg,
    delta_angle_rad,
    lerp_angle_deg,
    lerp_angle_rad,
    move_towards_angle_deg,
    move_towards_angle_rad,
    is_angle_between_deg,
    is_angle_between_rad,
    approximately_equal_deg,
    approximately_equal_rad,
)
from .trigonometry import cot, sec, csc
from .number_sets import is_integer, is_natural, is_even, is_odd, is_between
from .combinatorics import factorial, double_factorial, permutation, combination
from .averages import arithmetic, geometric, harmonic, quadratic, weighted_arithmetic
from .statistics import (
    minimum,
    maximum,
    median,
    variance_population,
    variance_sample,
    std_dev_population,
    std_dev_sample,
)
from .frequency import mode, modes, percentile, quantile
from .roots import safe_root, root, newton_root, try_newton_root

__all__ = [
    # Angles
    "deg_to_rad",
    "rad_to_deg",
    "wrap_deg",
    "wrap_rad",
    "wrap_deg_signed",
    "wrap_rad_signed",
    "delta_angle_deg",
    "delta_angle_rad",
    "lerp_angle_deg",
    "lerp_angle_rad",
    "move_towards_angle_deg",
    "move_towards_angle_rad",
    "is_angle_between_deg",
    "is_angle_between_rad",
    "approximately_equal_deg",
    "approximately_equal_rad",
    # Trigonometry
    "cot",
    "sec",
    "csc",
    # Number sets
    "is_integer",
    "is_natural",
    "is_even",
    "is_odd",
    "is_between",
    # Combinatorics
    "factorial",
    "double_factorial",
    "permutation",
    "combination",
    # Averages
    "arithmetic",
    "geometric",
    "harmonic",
    "quadratic",
    "weighted_arithmetic",
    # Statistics
    "minimum",
    "maximum",
    "median",
    "variance_population",
    "variance_sample",
    "std_dev_population",
    "std_dev_sample",
    # Frequency
    "mode",
    "modes",
    "percentile",
    "quantile",
    # Roots
    "safe_root",
    "root",
    "newton_root",
    "try_newton_root",
]
