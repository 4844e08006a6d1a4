"""
HullScope Resistance Calculator

Calm-water resistance for small craft.

Implements the ITTC-57 friction line and an empirical wave-making term:
    Cf = 0.075 / (log10(Re) - 2)²
    Cw = 0.001 × Fn⁴ × Cp × 10 × k_wave

where k_wave combines the bow and stern wave-resistance factors and Fn is
taken on the bow-adjusted effective waterline length.
"""

from __future__ import annotations
from typing import List, Optional
import logging
import math

from hullscope.core.coefficients import (
    PRISMATIC_COEFFICIENTS,
    WETTED_SURFACE_COEFFICIENTS,
)
from hullscope.core.constants import (
    GRAVITY_M_S2,
    ITTC_57_CONSTANT,
    KNOTS_TO_MS,
    MIN_RESISTANCE_SPEED_MS,
    RESISTANCE_CURVE_MARGIN_KTS,
    RESISTANCE_CURVE_STEP_KTS,
    REYNOLDS_FLOOR,
    SEAWATER_DENSITY_KG_M3,
    WATER_KINEMATIC_VISCOSITY,
    WATTS_PER_HP,
    WAVE_COEFFICIENT,
    WAVE_CP_SCALE,
)
from hullscope.core.params import HullParams
from hullscope.physics.performance import (
    calculate_effective_lwl,
    calculate_wave_resistance_factor,
)
from hullscope.physics.results import ResistancePoint

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

RHO_SEAWATER = SEAWATER_DENSITY_KG_M3  # 1025.0 kg/m³
NU_SEAWATER = WATER_KINEMATIC_VISCOSITY  # 1.19e-6 m²/s
GRAVITY = GRAVITY_M_S2  # 9.81 m/s²


# =============================================================================
# COMPONENTS
# =============================================================================

def estimate_wetted_surface(params: HullParams, draft: float) -> float:
    """Wetted surface (m²): S ≈ L × (B + 2T) × c(hull type)"""
    coefficient = WETTED_SURFACE_COEFFICIENTS[params.hull_type]
    return params.lwl * (params.beam + 2 * draft) * coefficient


def calculate_reynolds_number(speed_ms: float, lwl: float) -> float:
    return speed_ms * lwl / NU_SEAWATER


def calculate_friction_coefficient(reynolds: float) -> float:
    """ITTC-57: Cf = 0.075 / (log10(Re) - 2)², with Re floored at 1000."""
    return ITTC_57_CONSTANT / (math.log10(max(reynolds, REYNOLDS_FLOOR)) - 2) ** 2


def calculate_frictional_resistance(speed_ms: float, lwl: float, wetted_surface: float) -> float:
    """Rf = ½ × ρ × V² × S × Cf  (N)"""
    if speed_ms < MIN_RESISTANCE_SPEED_MS:
        return 0.0

    cf = calculate_friction_coefficient(calculate_reynolds_number(speed_ms, lwl))
    return 0.5 * RHO_SEAWATER * speed_ms * speed_ms * wetted_surface * cf


def get_prismatic_coefficient(params: HullParams) -> float:
    """Design Cp, falling back to the hull-type table when unset."""
    return params.prismatic_coefficient or PRISMATIC_COEFFICIENTS[params.hull_type]


def calculate_wave_resistance(
    speed_ms: float,
    wetted_surface: float,
    params: HullParams,
    effective_lwl: Optional[float] = None,
) -> float:
    """
    Wave-making resistance (N).

    Grows with Fn⁴, so it dominates as Fn approaches 0.4-0.5.
    """
    if speed_ms < MIN_RESISTANCE_SPEED_MS:
        return 0.0

    if effective_lwl is None:
        effective_lwl = calculate_effective_lwl(params)

    fn = speed_ms / math.sqrt(GRAVITY * effective_lwl)
    cp = get_prismatic_coefficient(params)
    cw = WAVE_COEFFICIENT * fn ** 4 * cp * WAVE_CP_SCALE * calculate_wave_resistance_factor(params)

    return 0.5 * RHO_SEAWATER * speed_ms * speed_ms * wetted_surface * cw


# =============================================================================
# RESISTANCE CURVE
# =============================================================================

def calculate_resistance(speed_kts: float, params: HullParams, draft: float) -> ResistancePoint:
    """Resistance breakdown and required power at one speed."""
    speed_ms = speed_kts * KNOTS_TO_MS
    wetted_surface = estimate_wetted_surface(params, draft)
    effective_lwl = calculate_effective_lwl(params)

    rf = calculate_frictional_resistance(speed_ms, effective_lwl, wetted_surface)
    rw = calculate_wave_resistance(speed_ms, wetted_surface, params, effective_lwl)
    rtotal = rf + rw

    # P = R × V, watts to hp
    power_required = rtotal * speed_ms / WATTS_PER_HP

    return ResistancePoint(
        speed=speed_kts,
        rf=rf,
        rw=rw,
        rtotal=rtotal,
        power_required=power_required,
    )


def resistance_curve_speeds(max_speed: float) -> List[float]:
    """Speeds (kn) from 0 to ceil(max_speed) + 2 in 0.5 kn steps, inclusive."""
    top = math.ceil(max_speed) + RESISTANCE_CURVE_MARGIN_KTS
    count = int(round(top / RESISTANCE_CURVE_STEP_KTS))
    return [i * RESISTANCE_CURVE_STEP_KTS for i in range(count + 1)]


def calculate_resistance_curve(
    params: HullParams,
    draft: float,
    max_speed: float,
) -> List[ResistancePoint]:
    return [
        calculate_resistance(speed, params, draft)
        for speed in resistance_curve_speeds(max_speed)
    ]
