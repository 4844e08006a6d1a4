"""
HullScope Core Enumerations

Closed enumerations for the hull design vector and the stability rating.
Values match the identifiers used by the design parameters in serialized form.
"""

from enum import Enum


class HullType(str, Enum):
    """
    Hull section configurations, ordered from flattest to roundest.
    """
    FLAT_BOTTOM = "flat-bottom"
    SINGLE_CHINE = "single-chine"
    MULTI_CHINE = "multi-chine"
    ROUND_BILGE = "round-bilge"


class BowType(str, Enum):
    """
    Stem profile options.
    """
    PLUMB = "plumb"        # Vertical stem, max waterline length
    RAKED = "raked"        # Traditional forward-angled stem
    REVERSE = "reverse"    # Wave-piercing / axe bow
    SPOON = "spoon"        # Classic workboat, soft entry
    CLIPPER = "clipper"    # Concave, classic yacht


class SternType(str, Enum):
    """
    Stern configurations.
    """
    TRANSOM = "transom"
    CANOE = "canoe"
    DOUBLE_ENDED = "double-ended"
    SUGAR_SCOOP = "sugar-scoop"


class DeadriseVariation(str, Enum):
    """
    Longitudinal variation of the deadrise angle.
    """
    CONSTANT = "constant"
    INCREASING_AFT = "increasing-aft"
    DECREASING_AFT = "decreasing-aft"


class BallastType(str, Enum):
    NONE = "none"
    JERRY_CANS = "jerry-cans"
    FIXED = "fixed"
    WATER = "water"


class EngineType(str, Enum):
    OUTBOARD = "outboard"
    INBOARD = "inboard"
    STERNDRIVE = "sterndrive"
    ELECTRIC = "electric"


class StabilityRating(str, Enum):
    """
    Initial stability assessment derived from GM thresholds.
    """
    STIFF = "stiff"
    MODERATE = "moderate"
    TENDER = "tender"
    DANGEROUS = "dangerous"
