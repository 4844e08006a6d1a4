"""
HullScope Design Parameters

HullParams is the complete design vector consumed by the physics engine.
Instances are immutable; edits go through replace() and always yield a new
design.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace as _replace
from enum import Enum
from typing import Any, Dict, List, Tuple

from hullscope.core.enums import (
    BallastType,
    BowType,
    DeadriseVariation,
    EngineType,
    HullType,
    SternType,
)
from hullscope.core.parameter_bounds import PARAMETER_BOUNDS, validate_and_clamp
from hullscope.errors import ParameterBoundsError


_ENUM_FIELDS = {
    "hull_type": HullType,
    "deadrise_variation": DeadriseVariation,
    "bow_type": BowType,
    "stern_type": SternType,
    "ballast_type": BallastType,
    "engine_type": EngineType,
}


@dataclass(frozen=True)
class HullParams:
    """
    Trailerable hull design vector.

    Defaults describe a 7 m single-chine outboard skiff carrying two people.
    Numeric domains are declared in parameter_bounds.PARAMETER_BOUNDS.
    """
    # Dimensions (m)
    lwl: float = 7.0
    beam: float = 1.8
    depth: float = 0.85

    # Hull form
    hull_type: HullType = HullType.SINGLE_CHINE
    deadrise: float = 15.0  # deg
    deadrise_variation: DeadriseVariation = DeadriseVariation.CONSTANT

    # Bow configuration
    bow_type: BowType = BowType.PLUMB
    bow_rake: float = 0.0  # deg from vertical
    bow_flare: float = 10.0  # deg

    # Stern configuration
    stern_type: SternType = SternType.TRANSOM
    transom_rake: float = 10.0  # deg from vertical
    transom_immersion: float = 30.0  # % of transom below waterline

    # Hull form refinements
    prismatic_coefficient: float = 0.58
    lcb: float = 52.0  # % of LWL from bow
    rocker: float = 0.05  # m

    # Chine configuration
    chine_height: float = 0.3  # fraction of depth
    chine_angle: float = 5.0  # deg

    # Loading
    crew_weight: float = 160.0  # kg
    cargo_weight: float = 50.0  # kg
    ballast_type: BallastType = BallastType.NONE
    ballast_weight: float = 0.0  # kg
    ballast_height: float = 0.1  # m above keel
    fuel_capacity: float = 50.0  # L
    water_capacity: float = 40.0  # L

    # Power
    engine_hp: float = 25.0
    engine_type: EngineType = EngineType.OUTBOARD
    propeller_diameter: float = 11.0  # in
    propeller_pitch: float = 13.0  # in

    def __post_init__(self):
        # Accept plain strings for the enumerated fields
        for name, enum_cls in _ENUM_FIELDS.items():
            value = getattr(self, name)
            if not isinstance(value, enum_cls):
                object.__setattr__(self, name, enum_cls(value))

    @property
    def total_load(self) -> float:
        """Crew + cargo + ballast (kg)."""
        return self.crew_weight + self.cargo_weight + self.ballast_weight

    def replace(self, **changes: Any) -> "HullParams":
        return _replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary with enum values as strings."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.value if isinstance(value, Enum) else value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HullParams":
        """Deserialize from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def numeric_fields() -> List[str]:
    """Names of the bounded numeric fields, in declaration order."""
    return [f.name for f in fields(HullParams) if f.name in PARAMETER_BOUNDS]


def clamp_params(params: HullParams) -> Tuple[HullParams, List[str]]:
    """
    Clamp every numeric field to its declared domain.

    Returns:
        Tuple of (clamped_params, warnings)
    """
    changes: Dict[str, float] = {}
    warnings: List[str] = []

    for name in numeric_fields():
        value = getattr(params, name)
        clamped, field_warnings = validate_and_clamp(name, value)
        if field_warnings:
            changes[name] = clamped
            warnings.extend(field_warnings)

    if not changes:
        return params, warnings
    return params.replace(**changes), warnings


def validate_params(params: HullParams) -> None:
    """
    Reject a design with any numeric field outside its declared domain.

    Raises:
        ParameterBoundsError: listing every violating field
    """
    violations = []
    for name in numeric_fields():
        value = getattr(params, name)
        bounds = PARAMETER_BOUNDS[name]
        if not bounds["min"] <= value <= bounds["max"]:
            violations.append((name, value, (bounds["min"], bounds["max"])))

    if violations:
        raise ParameterBoundsError(violations)


def interpolate_params(a: HullParams, b: HullParams, t: float) -> HullParams:
    """
    Blend two designs: numeric fields linearly, enumerated fields switch
    from a to b at t = 0.5.

    Args:
        a: Design at t = 0
        b: Design at t = 1
        t: Blend position on [0, 1]
    """
    blended: Dict[str, Any] = {}
    for f in fields(HullParams):
        va = getattr(a, f.name)
        vb = getattr(b, f.name)
        if f.name in _ENUM_FIELDS:
            blended[f.name] = va if t < 0.5 else vb
        else:
            blended[f.name] = va + (vb - va) * t
    return HullParams(**blended)
