"""
Physical constants and numerical defaults.

All physical constants are SI values.
References:
    - CODATA 2018 recommended values
    - NIST Reference on Constants, Units, and Uncertainty
"""

import math
from typing import Final

# =============================================================================
# Fundamental Constants
# =============================================================================

# Speed of light in vacuum (m/s), exact
SPEED_OF_LIGHT: Final[float] = 299792458.0

# Planck constant (J·s), exact since the 2019 SI redefinition
H_PLANCK: Final[float] = 6.62607015e-34

# Reduced Planck constant ħ = h / 2π (J·s)
H_BAR: Final[float] = H_PLANCK / (2.0 * math.pi)

# Elementary charge (C), exact
ELEMENTARY_CHARGE: Final[float] = 1.602176634e-19

# Boltzmann constant (J/K), exact
K_BOLTZMANN: Final[float] = 1.380649e-23

# Avogadro's number (1/mol), exact
N_AVOGADRO: Final[float] = 6.02214076e23

# Universal gas constant (J/(mol·K))
# R = N_A * k_B = 8.31446261815324
GAS_CONSTANT: Final[float] = N_AVOGADRO * K_BOLTZMANN

# Newtonian constant of gravitation (m³/(kg·s²))
G_NEWTON: Final[float] = 6.67430e-11

# Standard gravitational acceleration (m/s²)
# Reference: NIST standard gravity
G0: Final[float] = 9.80665

# Vacuum electric permittivity ε0 (F/m)
VACUUM_PERMITTIVITY: Final[float] = 8.8541878128e-12

# Vacuum magnetic permeability μ0 (N/A²)
VACUUM_PERMEABILITY: Final[float] = 1.25663706212e-6

# Coulomb constant k = 1 / (4π ε0) (N·m²/C²)
COULOMB_CONSTANT: Final[float] = 1.0 / (4.0 * math.pi * VACUUM_PERMITTIVITY)

# Stefan-Boltzmann constant (W/(m²·K⁴))
STEFAN_BOLTZMANN: Final[float] = 5.670374419e-8

# =============================================================================
# Reference States and Pressure Units
# =============================================================================

# Standard atmosphere (Pa)
P_ATM: Final[float] = 101325.0

# One bar (Pa)
P_BAR: Final[float] = 100000.0

# One millimetre of mercury, conventional (Pa)
P_MMHG: Final[float] = 133.322387415

# Absolute zero on the Celsius scale (°C)
ABSOLUTE_ZERO_CELSIUS: Final[float] = -273.15

# Offset between Kelvin and Celsius scales
KELVIN_OFFSET: Final[float] = 273.15

# =============================================================================
# Numerical Defaults
# =============================================================================

# Equilibrium and energy-balance checks
DEFAULT_TOLERANCE: Final[float] = 1e-9

# Distance to the nearest integer still treated as an integer
INTEGER_EPSILON: Final[float] = 1e-9

# Approximate angle equality
ANGLE_TOLERANCE_DEG: Final[float] = 1e-4
ANGLE_TOLERANCE_RAD: Final[float] = 1e-6

# Newton-Raphson root finder
NEWTON_TOLERANCE: Final[float] = 1e-10
NEWTON_MAX_ITERATIONS: Final[int] = 100

# Largest arguments whose results fit a signed 64-bit integer
FACTORIAL_LIMIT: Final[int] = 20
DOUBLE_FACTORIAL_LIMIT: Final[int] = 33
