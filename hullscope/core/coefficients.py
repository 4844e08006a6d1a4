"""
HullScope Coefficient Tables

Per-variant empirical coefficients, keyed by the closed enumerations in
enums.py. Every enum member must have an entry in each table.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from hullscope.core.enums import BowType, EngineType, HullType, SternType


# =============================================================================
# HULL TYPE TABLES
# =============================================================================

# CB = displaced volume / (L × B × T)
BLOCK_COEFFICIENTS: Dict[HullType, float] = {
    HullType.FLAT_BOTTOM: 0.78,
    HullType.SINGLE_CHINE: 0.60,
    HullType.MULTI_CHINE: 0.55,
    HullType.ROUND_BILGE: 0.52,
}

# Used when the design does not specify its own prismatic coefficient
PRISMATIC_COEFFICIENTS: Dict[HullType, float] = {
    HullType.FLAT_BOTTOM: 0.72,
    HullType.SINGLE_CHINE: 0.62,
    HullType.MULTI_CHINE: 0.58,
    HullType.ROUND_BILGE: 0.55,
}

# S ≈ L × (B + 2T) × c
WETTED_SURFACE_COEFFICIENTS: Dict[HullType, float] = {
    HullType.FLAT_BOTTOM: 0.85,
    HullType.SINGLE_CHINE: 0.75,
    HullType.MULTI_CHINE: 0.72,
    HullType.ROUND_BILGE: 0.70,
}

# Multiplier on the SLR planing threshold (flat bottoms plane easier)
PLANING_THRESHOLD_MULTIPLIERS: Dict[HullType, float] = {
    HullType.FLAT_BOTTOM: 0.9,
    HullType.SINGLE_CHINE: 1.0,
    HullType.MULTI_CHINE: 1.0,
    HullType.ROUND_BILGE: 1.2,
}

# Ordinal code on [0, 1] used as the surrogate's hull-type input
HULL_TYPE_CODES: Dict[HullType, float] = {
    HullType.FLAT_BOTTOM: 0.0,
    HullType.SINGLE_CHINE: 1.0 / 3.0,
    HullType.MULTI_CHINE: 2.0 / 3.0,
    HullType.ROUND_BILGE: 1.0,
}


# =============================================================================
# CENTRE OF GRAVITY HEIGHTS
# =============================================================================

# Vertical position of mass items as a fraction of hull depth above keel.
# Ballast uses the explicit ballast_height parameter instead.
CG_HEIGHT_FACTORS: Dict[str, float] = {
    "hull": 0.4,
    "engine": 0.3,   # transom-mounted
    "crew": 0.5,     # seated
    "cargo": 0.35,   # low in hull
}


# =============================================================================
# ENGINE WEIGHTS
# =============================================================================

@dataclass(frozen=True)
class EngineWeight:
    """Engine installed weight model: base + per_hp × HP (kg)."""
    base_kg: float
    per_hp_kg: float

    def weight(self, engine_hp: float) -> float:
        return self.base_kg + self.per_hp_kg * engine_hp


ENGINE_WEIGHTS: Dict[EngineType, EngineWeight] = {
    EngineType.OUTBOARD: EngineWeight(base_kg=20.0, per_hp_kg=2.0),
    EngineType.INBOARD: EngineWeight(base_kg=60.0, per_hp_kg=3.5),
    EngineType.STERNDRIVE: EngineWeight(base_kg=80.0, per_hp_kg=3.0),
    EngineType.ELECTRIC: EngineWeight(base_kg=30.0, per_hp_kg=4.0),  # includes batteries
}


# =============================================================================
# BOW AND STERN FACTORS
# =============================================================================

@dataclass(frozen=True)
class BowFactors:
    """Dimensionless bow effects on sailing length, waves, motion and spray."""
    lwl_efficiency: float
    wave_resistance: float
    pitching: float
    spray: float


@dataclass(frozen=True)
class SternFactors:
    """Dimensionless stern effects on following seas, drag and planing."""
    following_sea: float
    transom_drag: float
    planing: float


# Raked bows lose effective length with rake: 0.92 - 0.002 × rake
RAKED_BOW_BASE_EFFICIENCY = 0.92
RAKED_BOW_EFFICIENCY_PER_DEG = 0.002

BOW_FACTORS: Dict[BowType, BowFactors] = {
    BowType.PLUMB: BowFactors(lwl_efficiency=1.0, wave_resistance=1.0, pitching=1.1, spray=0.7),
    BowType.RAKED: BowFactors(
        lwl_efficiency=RAKED_BOW_BASE_EFFICIENCY, wave_resistance=0.95, pitching=1.0, spray=1.0
    ),
    BowType.REVERSE: BowFactors(lwl_efficiency=1.02, wave_resistance=0.85, pitching=0.75, spray=0.5),
    BowType.SPOON: BowFactors(lwl_efficiency=0.95, wave_resistance=0.92, pitching=0.95, spray=0.9),
    BowType.CLIPPER: BowFactors(lwl_efficiency=0.90, wave_resistance=0.93, pitching=0.98, spray=1.1),
}

STERN_FACTORS: Dict[SternType, SternFactors] = {
    SternType.TRANSOM: SternFactors(following_sea=0.8, transom_drag=1.0, planing=1.0),
    SternType.CANOE: SternFactors(following_sea=1.0, transom_drag=0.7, planing=0.3),
    SternType.DOUBLE_ENDED: SternFactors(following_sea=1.0, transom_drag=0.7, planing=0.2),
    SternType.SUGAR_SCOOP: SternFactors(following_sea=0.75, transom_drag=1.1, planing=0.95),
}


def get_bow_factors(bow_type: BowType, bow_rake: float = 0.0) -> BowFactors:
    """
    Look up bow factors, applying the rake adjustment for raked bows.

    Args:
        bow_type: Stem profile
        bow_rake: Degrees from vertical (only affects raked bows)
    """
    bow_type = BowType(bow_type)
    factors = BOW_FACTORS[bow_type]
    if bow_type == BowType.RAKED:
        return BowFactors(
            lwl_efficiency=RAKED_BOW_BASE_EFFICIENCY - bow_rake * RAKED_BOW_EFFICIENCY_PER_DEG,
            wave_resistance=factors.wave_resistance,
            pitching=factors.pitching,
            spray=factors.spray,
        )
    return factors


def get_stern_factors(stern_type: SternType) -> SternFactors:
    return STERN_FACTORS[SternType(stern_type)]
