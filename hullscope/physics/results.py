"""
HullScope Physics Results

Immutable result types produced by compute_physics. A new PhysicsResults is
built for every design; instances are never updated in place.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from hullscope.core.enums import StabilityRating
from hullscope.stability.gz_curve import RightingPoint


@dataclass(frozen=True)
class ResistancePoint:
    """Single point on the speed/resistance curve."""
    speed: float           # knots
    rf: float              # Frictional resistance (N)
    rw: float              # Wave-making resistance (N)
    rtotal: float          # Total resistance (N)
    power_required: float  # hp

    def to_dict(self) -> Dict[str, Any]:
        return {
            "speed": round(self.speed, 2),
            "rf": round(self.rf, 2),
            "rw": round(self.rw, 2),
            "rtotal": round(self.rtotal, 2),
            "power_required": round(self.power_required, 3),
        }


@dataclass(frozen=True)
class PhysicsResults:
    """
    Hydrostatics and performance for one design.

    GM = KB + BM - KG holds exactly for every instance.
    """
    # Displacement & draft
    displacement: float  # kg
    draft: float         # m
    freeboard: float     # m

    # Stability
    kb: float  # Keel to centre of buoyancy (m)
    bm: float  # Metacentric radius (m)
    kg: float  # Keel to centre of gravity (m)
    gm: float  # Metacentric height (m)
    stability_rating: StabilityRating

    # Speed
    hull_speed: float          # knots, displacement-mode limit
    froude_number: float       # at hull speed
    max_speed: float           # knots, achievable with installed power
    planing_capable: bool
    speed_length_ratio: float  # max speed / sqrt(LWL ft)

    # Bow/stern effects
    effective_lwl: float  # m
    wave_resistance_factor: float
    pitching_factor: float
    spray_deflection: float

    # Curves
    resistance_curve: Tuple[ResistancePoint, ...] = field(default_factory=tuple)
    righting_curve: Tuple[RightingPoint, ...] = field(default_factory=tuple)

    @property
    def km(self) -> float:
        """Height of metacentre above keel (m)."""
        return self.kb + self.bm

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary with appropriate precision."""
        return {
            "displacement": round(self.displacement, 2),
            "draft": round(self.draft, 4),
            "freeboard": round(self.freeboard, 4),
            "kb": round(self.kb, 4),
            "bm": round(self.bm, 4),
            "kg": round(self.kg, 4),
            "gm": round(self.gm, 4),
            "stability_rating": self.stability_rating.value,
            "hull_speed": round(self.hull_speed, 3),
            "froude_number": round(self.froude_number, 4),
            "max_speed": round(self.max_speed, 3),
            "planing_capable": self.planing_capable,
            "speed_length_ratio": round(self.speed_length_ratio, 3),
            "effective_lwl": round(self.effective_lwl, 3),
            "wave_resistance_factor": round(self.wave_resistance_factor, 4),
            "pitching_factor": round(self.pitching_factor, 4),
            "spray_deflection": round(self.spray_deflection, 4),
            "resistance_curve": [p.to_dict() for p in self.resistance_curve],
            "righting_curve": [p.to_dict() for p in self.righting_curve],
        }
