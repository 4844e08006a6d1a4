"""
HullScope Physics Engine

compute_physics() turns a HullParams design into PhysicsResults. It is a pure
function with no hidden state: identical designs always give identical
results, which lets it serve as the surrogate's training oracle.

No bounds checking is done here; callers clamp or validate parameters first.
"""

from __future__ import annotations
import logging

from hullscope.core.params import HullParams
from hullscope.physics.hydrostatics import (
    calculate_bm,
    calculate_displacement,
    calculate_draft,
    calculate_freeboard,
    calculate_gm,
    calculate_kb,
    calculate_kg,
    get_stability_rating,
)
from hullscope.physics.performance import (
    calculate_effective_lwl,
    calculate_froude_number,
    calculate_hull_speed,
    calculate_pitching_factor,
    calculate_speed_length_ratio,
    calculate_spray_deflection,
    calculate_wave_resistance_factor,
    can_plane,
    estimate_max_speed,
)
from hullscope.physics.resistance import calculate_resistance_curve
from hullscope.physics.results import PhysicsResults
from hullscope.stability.gz_curve import calculate_righting_curve

logger = logging.getLogger(__name__)


def compute_physics(params: HullParams) -> PhysicsResults:
    """
    Calculate all hydrostatics and performance for a design.

    Args:
        params: Hull design within its declared parameter domain

    Returns:
        PhysicsResults with stability, speed and both curves
    """
    # Displacement and draft
    displacement = calculate_displacement(params)
    draft = calculate_draft(displacement, params)
    freeboard = calculate_freeboard(draft, params.depth)

    # Stability
    kb = calculate_kb(draft)
    bm = calculate_bm(params, displacement)
    kg = calculate_kg(params, displacement)
    gm = calculate_gm(kb, bm, kg)

    # Bow/stern effects
    effective_lwl = calculate_effective_lwl(params)

    # Speed on the effective sailing length
    hull_speed = calculate_hull_speed(effective_lwl)
    froude_number = calculate_froude_number(hull_speed, effective_lwl)
    max_speed = estimate_max_speed(params, displacement, hull_speed)

    return PhysicsResults(
        displacement=displacement,
        draft=draft,
        freeboard=freeboard,
        kb=kb,
        bm=bm,
        kg=kg,
        gm=gm,
        stability_rating=get_stability_rating(gm),
        hull_speed=hull_speed,
        froude_number=froude_number,
        max_speed=max_speed,
        planing_capable=can_plane(max_speed, params),
        speed_length_ratio=calculate_speed_length_ratio(max_speed, params.lwl),
        effective_lwl=effective_lwl,
        wave_resistance_factor=calculate_wave_resistance_factor(params),
        pitching_factor=calculate_pitching_factor(params),
        spray_deflection=calculate_spray_deflection(params),
        resistance_curve=tuple(calculate_resistance_curve(params, draft, max_speed)),
        righting_curve=tuple(calculate_righting_curve(gm, bm, kb, kg)),
    )
