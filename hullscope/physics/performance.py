"""
HullScope Performance Prediction

Speed limits, planing assessment and bow/stern performance factors.

- Hull speed: V = 1.34 × sqrt(LWL_ft), on the bow-adjusted effective LWL
- Max speed: Crouch's formula V = C × sqrt(HP / Δ_lb), capped at
  1.5 × hull speed and 15 kn
- Planing: speed-length ratio against a threshold scaled by hull and stern type
"""

from __future__ import annotations
import math

from hullscope.core.coefficients import (
    PLANING_THRESHOLD_MULTIPLIERS,
    get_bow_factors,
    get_stern_factors,
)
from hullscope.core.constants import (
    CROUCH_CONSTANT,
    GRAVITY_M_S2,
    HULL_SPEED_COEFFICIENT,
    KG_TO_LBS,
    KNOTS_TO_MS,
    MAX_SPEED_HULL_SPEED_MULTIPLE,
    MAX_SPEED_LIMIT_KTS,
    METERS_TO_FEET,
    PITCHING_STERN_FACTOR,
    SLR_PLANING_THRESHOLD,
    SPRAY_FLARE_FACTOR,
)
from hullscope.core.params import HullParams


# =============================================================================
# BOW / STERN EFFECTS
# =============================================================================

def calculate_effective_lwl(params: HullParams) -> float:
    """
    Effective sailing length.

    Reverse bows add a little length; raked bows lose length with rake.
    """
    bow = get_bow_factors(params.bow_type, params.bow_rake)
    return params.lwl * bow.lwl_efficiency


def calculate_wave_resistance_factor(params: HullParams) -> float:
    bow = get_bow_factors(params.bow_type, params.bow_rake)
    stern = get_stern_factors(params.stern_type)
    return bow.wave_resistance * stern.transom_drag


def calculate_pitching_factor(params: HullParams) -> float:
    """Pitching tendency from bow entry and stern form."""
    bow = get_bow_factors(params.bow_type, params.bow_rake)
    stern = get_stern_factors(params.stern_type)
    return bow.pitching * (1 + (1 - stern.following_sea) * PITCHING_STERN_FACTOR)


def calculate_spray_deflection(params: HullParams) -> float:
    """Spray rating; lower is drier. Flare reduces spray."""
    bow = get_bow_factors(params.bow_type, params.bow_rake)
    flare_effect = 1 - params.bow_flare * SPRAY_FLARE_FACTOR
    return bow.spray * flare_effect


# =============================================================================
# SPEED
# =============================================================================

def calculate_hull_speed(lwl: float) -> float:
    """Displacement-mode speed limit (kn): 1.34 × sqrt(LWL_ft)"""
    return HULL_SPEED_COEFFICIENT * math.sqrt(lwl * METERS_TO_FEET)


def calculate_froude_number(speed_kts: float, lwl: float) -> float:
    """Fn = V / sqrt(g × L)"""
    return speed_kts * KNOTS_TO_MS / math.sqrt(GRAVITY_M_S2 * lwl)


def calculate_speed_length_ratio(speed_kts: float, lwl: float) -> float:
    return speed_kts / math.sqrt(lwl * METERS_TO_FEET)


def estimate_max_speed(params: HullParams, displacement: float, hull_speed: float) -> float:
    """
    Maximum achievable speed (kn) with the installed engine.

    Crouch: V = C × sqrt(SHP / Δ_lb), limited to 1.5 × hull speed and 15 kn.
    """
    displacement_lbs = displacement * KG_TO_LBS
    planing_speed = CROUCH_CONSTANT * math.sqrt(params.engine_hp / displacement_lbs)
    return min(
        planing_speed,
        hull_speed * MAX_SPEED_HULL_SPEED_MULTIPLE,
        MAX_SPEED_LIMIT_KTS,
    )


def planing_threshold(params: HullParams) -> float:
    """
    Speed-length ratio needed to plane.

    Flat bottoms plane easier, round bilges harder; canoe and double-ended
    sterns raise the threshold sharply.
    """
    threshold = SLR_PLANING_THRESHOLD * PLANING_THRESHOLD_MULTIPLIERS[params.hull_type]
    return threshold / get_stern_factors(params.stern_type).planing


def can_plane(max_speed: float, params: HullParams) -> bool:
    slr = calculate_speed_length_ratio(max_speed, params.lwl)
    return slr > planing_threshold(params)
