"""
HullScope Physical Constants

Constants used throughout HullScope for hydrostatics and performance
calculations. Per-hull-type coefficient tables live in coefficients.py.
"""

# ==================== Physical Constants ====================

# Water properties
SEAWATER_DENSITY_KG_M3 = 1025.0  # kg/m³
FRESHWATER_DENSITY_KG_M3 = 1000.0  # kg/m³
WATER_KINEMATIC_VISCOSITY = 1.19e-6  # m²/s for seawater at 15°C

# Gravitational acceleration
GRAVITY_M_S2 = 9.81  # m/s²

# Unit conversions
METERS_TO_FEET = 3.28084
KNOTS_TO_MS = 0.514444
WATTS_PER_HP = 745.7
KG_TO_LBS = 2.20462


# ==================== Weight Build-up ====================

# Base hull structural weight for plywood construction (kg)
HULL_WEIGHT_KG = 150.0

# Tank contents (kg/L)
FUEL_DENSITY_KG_L = 0.85
WATER_DENSITY_KG_L = 1.0

# Tank contents sit low in the hull (fraction of depth above keel)
TANK_CG_FACTOR = 0.25

# ==================== Stability Constants ====================

# KB ≈ 0.53 × T for typical small-craft sections
KB_DRAFT_FRACTION = 0.53

# GM thresholds (m), evaluated top-down with strict comparisons
GM_STIFF = 1.0
GM_MODERATE = 0.5
GM_TENDER = 0.3

# Small-angle GZ formula applies below this heel (deg)
GZ_SMALL_ANGLE_LIMIT_DEG = 15.0

# Righting curve sweep (deg)
RIGHTING_CURVE_MAX_DEG = 45
RIGHTING_CURVE_STEP_DEG = 1

# ==================== Performance Constants ====================

# Displacement speed limit: V = 1.34 × sqrt(LWL_ft)
HULL_SPEED_COEFFICIENT = 1.34

# Crouch's planing formula constant (moderate planing hulls)
CROUCH_CONSTANT = 150.0

# Practical upper bounds on predicted speed
MAX_SPEED_HULL_SPEED_MULTIPLE = 1.5
MAX_SPEED_LIMIT_KTS = 15.0

# Speed-length ratio above which a hull is considered planing
SLR_PLANING_THRESHOLD = 2.5

# Froude number regime thresholds
FROUDE_DISPLACEMENT_MAX = 0.35
FROUDE_TRANSITION_MAX = 0.50
FROUDE_PLANING_MIN = 0.60

# ==================== Resistance Constants ====================

# ITTC-57 friction line constant
ITTC_57_CONSTANT = 0.075

# Reynolds number floor applied before taking log10
REYNOLDS_FLOOR = 1000.0

# Below this speed (m/s) resistance is taken as zero
MIN_RESISTANCE_SPEED_MS = 0.01

# Empirical wave-making coefficient: Cw = 0.001 × Fn⁴ × Cp × 10 × k_wave
WAVE_COEFFICIENT = 0.001
WAVE_CP_SCALE = 10.0

# Resistance curve sweep (kn)
RESISTANCE_CURVE_STEP_KTS = 0.5
RESISTANCE_CURVE_MARGIN_KTS = 2

# Spray deflection improvement per degree of bow flare
SPRAY_FLARE_FACTOR = 0.02

# Pitching sensitivity to stern following-sea behaviour
PITCHING_STERN_FACTOR = 0.2
