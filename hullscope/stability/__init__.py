"""
HullScope Stability

Righting arm (GZ) curves and their characteristics.
"""

from .gz_curve import (
    RightingPoint,
    RightingSummary,
    calculate_gz,
    calculate_righting_curve,
    summarize_righting_curve,
)

__all__ = [
    "RightingPoint",
    "RightingSummary",
    "calculate_gz",
    "calculate_righting_curve",
    "summarize_righting_curve",
]
