"""
HullScope Physics

Hydrostatics, resistance and performance for trailerable hulls.

compute_physics() is the single entry point; the step functions are exported
for callers that need one quantity at a time.
"""

from .results import (
    PhysicsResults,
    ResistancePoint,
)

from .engine import compute_physics

from .hydrostatics import (
    calculate_engine_weight,
    calculate_displacement,
    calculate_draft,
    calculate_freeboard,
    calculate_kb,
    calculate_bm,
    calculate_kg,
    calculate_gm,
    get_stability_rating,
)

from .performance import (
    calculate_effective_lwl,
    calculate_hull_speed,
    calculate_froude_number,
    calculate_speed_length_ratio,
    estimate_max_speed,
    can_plane,
)

from .resistance import (
    estimate_wetted_surface,
    calculate_frictional_resistance,
    calculate_wave_resistance,
    calculate_resistance,
    calculate_resistance_curve,
)

__all__ = [
    # Results
    "PhysicsResults",
    "ResistancePoint",
    # Engine
    "compute_physics",
    # Hydrostatics
    "calculate_engine_weight",
    "calculate_displacement",
    "calculate_draft",
    "calculate_freeboard",
    "calculate_kb",
    "calculate_bm",
    "calculate_kg",
    "calculate_gm",
    "get_stability_rating",
    # Performance
    "calculate_effective_lwl",
    "calculate_hull_speed",
    "calculate_froude_number",
    "calculate_speed_length_ratio",
    "estimate_max_speed",
    "can_plane",
    # Resistance
    "estimate_wetted_surface",
    "calculate_frictional_resistance",
    "calculate_wave_resistance",
    "calculate_resistance",
    "calculate_resistance_curve",
]
