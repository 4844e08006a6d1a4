"""
hullscope/core/parameter_bounds.py - Declared domains for hull parameters.

The engine does not bounds-check its inputs; hosts clamp or validate here
before calling compute_physics.
"""

from typing import Any, List, Tuple


PARAMETER_BOUNDS = {
    # Dimensions
    "lwl": {"min": 5.0, "max": 10.0, "step": 0.1, "unit": "m", "type": float},
    "beam": {"min": 1.2, "max": 2.8, "step": 0.05, "unit": "m", "type": float},
    "depth": {"min": 0.5, "max": 1.4, "step": 0.02, "unit": "m", "type": float},
    # Hull form
    "deadrise": {"min": 0, "max": 30, "step": 1, "unit": "deg", "type": float},
    # Bow configuration
    "bow_rake": {"min": -15, "max": 30, "step": 1, "unit": "deg", "type": float},
    "bow_flare": {"min": 0, "max": 25, "step": 1, "unit": "deg", "type": float},
    # Stern configuration
    "transom_rake": {"min": 0, "max": 20, "step": 1, "unit": "deg", "type": float},
    "transom_immersion": {"min": 0, "max": 100, "step": 5, "unit": "%", "type": float},
    # Hull form refinements
    "prismatic_coefficient": {"min": 0.50, "max": 0.70, "step": 0.01, "unit": "", "type": float},
    "lcb": {"min": 45, "max": 55, "step": 0.5, "unit": "%", "type": float},
    "rocker": {"min": 0, "max": 0.3, "step": 0.01, "unit": "m", "type": float},
    # Chine configuration
    "chine_height": {"min": 0.1, "max": 0.5, "step": 0.02, "unit": "xD", "type": float},
    "chine_angle": {"min": 0, "max": 15, "step": 1, "unit": "deg", "type": float},
    # Loading
    "crew_weight": {"min": 60, "max": 400, "step": 10, "unit": "kg", "type": float},
    "cargo_weight": {"min": 0, "max": 500, "step": 10, "unit": "kg", "type": float},
    "ballast_weight": {"min": 0, "max": 150, "step": 5, "unit": "kg", "type": float},
    "ballast_height": {"min": 0.05, "max": 0.3, "step": 0.01, "unit": "m", "type": float},
    "fuel_capacity": {"min": 20, "max": 200, "step": 10, "unit": "L", "type": float},
    "water_capacity": {"min": 20, "max": 100, "step": 5, "unit": "L", "type": float},
    # Power
    "engine_hp": {"min": 10, "max": 60, "step": 1, "unit": "hp", "type": float},
    "propeller_diameter": {"min": 8, "max": 16, "step": 0.5, "unit": "in", "type": float},
    "propeller_pitch": {"min": 6, "max": 20, "step": 0.5, "unit": "in", "type": float},
}

_UNBOUNDED = {"min": float("-inf"), "max": float("inf"), "step": 0, "unit": "", "type": float}


def validate_and_clamp(name: str, value: Any) -> Tuple[Any, List[str]]:
    """
    Validate and clamp a parameter value to its declared bounds.

    Args:
        name: HullParams field name (e.g., "beam")
        value: Value to validate and clamp

    Returns:
        Tuple of (clamped_value, warnings)
        - clamped_value: Value clamped to bounds and cast to correct type
        - warnings: List of warning messages if value was clamped
    """
    bounds = PARAMETER_BOUNDS.get(name, _UNBOUNDED)
    warnings = []

    clamped = max(bounds["min"], min(bounds["max"], value))

    if clamped != value:
        warnings.append(f"{name} clamped from {value} to {clamped}")

    return bounds["type"](clamped), warnings


def get_bounds(name: str) -> dict:
    """
    Get bounds for a parameter.

    Args:
        name: HullParams field name (e.g., "lwl")

    Returns:
        Dict with min, max, step, unit, type keys
    """
    return PARAMETER_BOUNDS.get(name, _UNBOUNDED)


def is_within_bounds(name: str, value: float) -> bool:
    bounds = get_bounds(name)
    return bounds["min"] <= value <= bounds["max"]
