"""
HullScope Core

Enumerations, physical constants, per-variant coefficient tables and the
HullParams design vector with its declared parameter domains.
"""

from .enums import (
    HullType,
    BowType,
    SternType,
    DeadriseVariation,
    BallastType,
    EngineType,
    StabilityRating,
)

from .coefficients import (
    BowFactors,
    SternFactors,
    EngineWeight,
    get_bow_factors,
    get_stern_factors,
)

from .params import (
    HullParams,
    clamp_params,
    validate_params,
    interpolate_params,
)

from .parameter_bounds import (
    PARAMETER_BOUNDS,
    validate_and_clamp,
    get_bounds,
)

__all__ = [
    # Enums
    "HullType",
    "BowType",
    "SternType",
    "DeadriseVariation",
    "BallastType",
    "EngineType",
    "StabilityRating",
    # Coefficients
    "BowFactors",
    "SternFactors",
    "EngineWeight",
    "get_bow_factors",
    "get_stern_factors",
    # Parameters
    "HullParams",
    "clamp_params",
    "validate_params",
    "interpolate_params",
    "PARAMETER_BOUNDS",
    "validate_and_clamp",
    "get_bounds",
]
