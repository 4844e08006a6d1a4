"""
HullScope GZ Curve Calculator

Righting arm (GZ) curve from initial stability quantities.

Small angles (θ < 15°):
    GZ = GM·sin(θ)

Large angles (θ ≥ 15°), centre of buoyancy shifted outboard:
    GZ = (BM·sin(θ) - (KG - KB)·sin(θ))·cos(θ)

GZ(0°) = 0 for every design.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence
import math
import logging

from hullscope.core.constants import (
    GZ_SMALL_ANGLE_LIMIT_DEG,
    RIGHTING_CURVE_MAX_DEG,
    RIGHTING_CURVE_STEP_DEG,
)

logger = logging.getLogger(__name__)


# =============================================================================
# GZ POINT
# =============================================================================

@dataclass(frozen=True)
class RightingPoint:
    """Single point on the righting arm curve."""
    heel_angle: float  # degrees
    gz: float          # righting arm (m)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heel_angle": round(self.heel_angle, 1),
            "gz": round(self.gz, 4),
        }


# =============================================================================
# CURVE GENERATION
# =============================================================================

def calculate_gz(heel_angle: float, gm: float, bm: float, kb: float, kg: float) -> float:
    """
    Righting arm (m) at a heel angle (deg).
    """
    theta = math.radians(heel_angle)

    if heel_angle < GZ_SMALL_ANGLE_LIMIT_DEG:
        return gm * math.sin(theta)

    buoyancy_shift = bm * math.sin(theta)
    gravity_arm = (kg - kb) * math.sin(theta)
    return (buoyancy_shift - gravity_arm) * math.cos(theta)


def calculate_righting_curve(gm: float, bm: float, kb: float, kg: float) -> List[RightingPoint]:
    """GZ from 0° to 45° inclusive in 1° steps."""
    return [
        RightingPoint(heel_angle=float(angle), gz=calculate_gz(angle, gm, bm, kb, kg))
        for angle in range(0, RIGHTING_CURVE_MAX_DEG + 1, RIGHTING_CURVE_STEP_DEG)
    ]


# =============================================================================
# CURVE CHARACTERISTICS
# =============================================================================

@dataclass(frozen=True)
class RightingSummary:
    """
    Key characteristics of a righting arm curve.

    Areas are in explicit m-rad units.
    """
    gz_max_m: float
    angle_gz_max_deg: float
    gz_30_m: float
    area_0_30_m_rad: float
    area_0_40_m_rad: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gz_max_m": round(self.gz_max_m, 4),
            "angle_gz_max_deg": round(self.angle_gz_max_deg, 1),
            "gz_30_m": round(self.gz_30_m, 4),
            "area_0_30_m_rad": round(self.area_0_30_m_rad, 4),
            "area_0_40_m_rad": round(self.area_0_40_m_rad, 4),
        }


def _gz_at(curve: Sequence[RightingPoint], angle: float) -> float:
    """Linear interpolation of GZ at an angle within the curve."""
    for p1, p2 in zip(curve, curve[1:]):
        if p1.heel_angle <= angle <= p2.heel_angle:
            span = p2.heel_angle - p1.heel_angle
            if span == 0:
                return p1.gz
            t = (angle - p1.heel_angle) / span
            return p1.gz + t * (p2.gz - p1.gz)
    return curve[-1].gz if angle > curve[-1].heel_angle else curve[0].gz


def _area_to(curve: Sequence[RightingPoint], end_deg: float) -> float:
    """Trapezoidal area under the curve from its first point to end_deg (m-rad)."""
    area = 0.0
    for p1, p2 in zip(curve, curve[1:]):
        if p1.heel_angle >= end_deg:
            break
        upper = min(p2.heel_angle, end_deg)
        gz_upper = p2.gz if upper == p2.heel_angle else _gz_at(curve, upper)
        area += 0.5 * (p1.gz + gz_upper) * math.radians(upper - p1.heel_angle)
    return area


def summarize_righting_curve(curve: Sequence[RightingPoint]) -> RightingSummary:
    """
    Summarize a righting curve.

    Raises:
        ValueError: If the curve has fewer than two points
    """
    if len(curve) < 2:
        raise ValueError(f"Righting curve needs at least 2 points, got {len(curve)}")

    peak = max(curve, key=lambda p: p.gz)

    return RightingSummary(
        gz_max_m=peak.gz,
        angle_gz_max_deg=peak.heel_angle,
        gz_30_m=_gz_at(curve, 30.0),
        area_0_30_m_rad=_area_to(curve, 30.0),
        area_0_40_m_rad=_area_to(curve, 40.0),
    )
