"""
HullScope Hydrostatics

Weight build-up, draft and initial stability for small trailerable hulls.

Simplifications:
- Draft from a per-hull-type block coefficient: T = Δ / (ρ × L × B × CB)
- KB ≈ 0.53 × T (fixed fraction, not a section integral)
- BM from a rectangular waterplane: I = L × B³ / 12, BM = I / ∇

BM scales with beam cubed and inversely with displaced volume, so GM is very
sensitive to beam and to the weight build-up.
"""

from __future__ import annotations
import logging

from hullscope.core.coefficients import (
    BLOCK_COEFFICIENTS,
    CG_HEIGHT_FACTORS,
    ENGINE_WEIGHTS,
)
from hullscope.core.constants import (
    FUEL_DENSITY_KG_L,
    GM_MODERATE,
    GM_STIFF,
    GM_TENDER,
    HULL_WEIGHT_KG,
    KB_DRAFT_FRACTION,
    SEAWATER_DENSITY_KG_M3,
    TANK_CG_FACTOR,
    WATER_DENSITY_KG_L,
)
from hullscope.core.enums import StabilityRating
from hullscope.core.params import HullParams

logger = logging.getLogger(__name__)

RHO_SEAWATER = SEAWATER_DENSITY_KG_M3  # 1025.0


# =============================================================================
# WEIGHT BUILD-UP
# =============================================================================

def calculate_engine_weight(params: HullParams) -> float:
    """Installed engine weight (kg) for the engine type and horsepower."""
    return ENGINE_WEIGHTS[params.engine_type].weight(params.engine_hp)


def calculate_fuel_weight(params: HullParams) -> float:
    return params.fuel_capacity * FUEL_DENSITY_KG_L


def calculate_water_weight(params: HullParams) -> float:
    return params.water_capacity * WATER_DENSITY_KG_L


def calculate_displacement(params: HullParams) -> float:
    """
    Total displacement (kg).

    Hull + engine + crew + cargo + ballast + fuel + fresh water.
    """
    return (
        HULL_WEIGHT_KG
        + calculate_engine_weight(params)
        + params.crew_weight
        + params.cargo_weight
        + params.ballast_weight
        + calculate_fuel_weight(params)
        + calculate_water_weight(params)
    )


# =============================================================================
# DRAFT & FREEBOARD
# =============================================================================

def calculate_draft(displacement: float, params: HullParams) -> float:
    """Draft from displacement: T = Δ / (ρ × L × B × CB)"""
    cb = BLOCK_COEFFICIENTS[params.hull_type]
    return displacement / (RHO_SEAWATER * params.lwl * params.beam * cb)


def calculate_freeboard(draft: float, depth: float) -> float:
    return depth - draft


# =============================================================================
# STABILITY
# =============================================================================

def calculate_kb(draft: float) -> float:
    """Centre of buoyancy above keel: KB ≈ 0.53 × T"""
    return KB_DRAFT_FRACTION * draft


def calculate_bm(params: HullParams, displacement: float) -> float:
    """
    Metacentric radius.

    BM = I / ∇
    I = L × B³ / 12 (rectangular waterplane second moment)
    ∇ = Δ / ρ (displaced volume)
    """
    inertia = params.lwl * params.beam ** 3 / 12.0
    volume = displacement / RHO_SEAWATER
    return inertia / volume


def calculate_kg(params: HullParams, displacement: float) -> float:
    """
    Centre of gravity above keel.

    Weighted average of each mass item at its assumed height. Hull, engine,
    crew and cargo sit at fixed fractions of depth; ballast at its explicit
    height; tanks low in the hull.
    """
    depth = params.depth
    tank_cg = TANK_CG_FACTOR * depth

    moments = (
        HULL_WEIGHT_KG * CG_HEIGHT_FACTORS["hull"] * depth
        + calculate_engine_weight(params) * CG_HEIGHT_FACTORS["engine"] * depth
        + params.crew_weight * CG_HEIGHT_FACTORS["crew"] * depth
        + params.cargo_weight * CG_HEIGHT_FACTORS["cargo"] * depth
        + params.ballast_weight * params.ballast_height
        + calculate_fuel_weight(params) * tank_cg
        + calculate_water_weight(params) * tank_cg
    )
    return moments / displacement


def calculate_gm(kb: float, bm: float, kg: float) -> float:
    """
    Metacentric height: GM = KB + BM - KG

    Positive GM rights the boat when heeled; negative GM capsizes it.
    """
    return kb + bm - kg


def get_stability_rating(gm: float) -> StabilityRating:
    """Rate initial stability from GM (strict thresholds, top-down)."""
    if gm > GM_STIFF:
        return StabilityRating.STIFF
    if gm > GM_MODERATE:
        return StabilityRating.MODERATE
    if gm > GM_TENDER:
        return StabilityRating.TENDER
    return StabilityRating.DANGEROUS
