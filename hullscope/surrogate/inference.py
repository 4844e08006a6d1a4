"""
inference.py - Surrogate inference and design-space grids

Single-design predictions and batched LWL × beam maps from a trained
surrogate. Both use the normalization statistics the model was trained with.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import logging

import numpy as np
from torch import nn

from hullscope.core.params import HullParams
from hullscope.errors import SurrogateNotReadyError
from hullscope.surrogate.config import SweepConfig
from hullscope.surrogate.model import predict_batch
from hullscope.surrogate.normalizer import NormalizationStats
from hullscope.surrogate.sampler import encode_inputs

__all__ = [
    'SurrogatePrediction',
    'DesignSpaceGrid',
    'predict_with_surrogate',
    'generate_design_space_grid',
]

logger = logging.getLogger(__name__)

_DEFAULT_SWEEP = SweepConfig()


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class SurrogatePrediction:
    """Approximate physics outputs for one design."""
    gm: float          # m
    hull_speed: float  # knots
    max_speed: float   # knots
    draft: float       # m

    def to_dict(self) -> Dict[str, float]:
        return {
            "gm": round(self.gm, 4),
            "hull_speed": round(self.hull_speed, 3),
            "max_speed": round(self.max_speed, 3),
            "draft": round(self.draft, 4),
        }


@dataclass(frozen=True)
class DesignSpaceGrid:
    """
    Surrogate predictions over an LWL × beam grid.

    Grids have shape (len(lwl_values), len(beam_values)); row i is
    lwl_values[i] and column j is beam_values[j].
    """
    lwl_values: np.ndarray
    beam_values: np.ndarray
    gm_grid: np.ndarray
    hull_speed_grid: np.ndarray
    draft_grid: np.ndarray

    @property
    def shape(self) -> Tuple[int, int]:
        return (len(self.lwl_values), len(self.beam_values))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lwl_values": self.lwl_values.tolist(),
            "beam_values": self.beam_values.tolist(),
            "gm_grid": self.gm_grid.tolist(),
            "hull_speed_grid": self.hull_speed_grid.tolist(),
            "draft_grid": self.draft_grid.tolist(),
        }


# =============================================================================
# INFERENCE
# =============================================================================

def predict_with_surrogate(
    model: Optional[nn.Module],
    stats: Optional[NormalizationStats],
    params: HullParams,
) -> Optional[SurrogatePrediction]:
    """
    Predict GM, hull speed, max speed and draft for one design.

    Returns None when the model or its statistics are not available yet.
    """
    if model is None or stats is None:
        logger.warning("Surrogate not trained yet, prediction unavailable")
        return None

    normalized = stats.normalize_inputs(np.array([encode_inputs(params)]))
    output = stats.denormalize_outputs(predict_batch(model, normalized))[0]

    return SurrogatePrediction(
        gm=float(output[0]),
        hull_speed=float(output[1]),
        max_speed=float(output[2]),
        draft=float(output[3]),
    )


def generate_design_space_grid(
    model: Optional[nn.Module],
    stats: Optional[NormalizationStats],
    fixed_params: HullParams,
    resolution: int = 40,
    lwl_range: Optional[Tuple[float, float]] = None,
    beam_range: Optional[Tuple[float, float]] = None,
) -> DesignSpaceGrid:
    """
    Map the LWL × beam plane with every other parameter held fixed.

    All resolution² designs go through the network in one batch.

    Args:
        model: Trained network
        stats: Statistics the network was trained with
        fixed_params: Design supplying every parameter except lwl and beam
        resolution: Points per axis (>= 2)
        lwl_range: (min, max) in m, defaults to the training sweep bounds
        beam_range: (min, max) in m, defaults to the training sweep bounds

    Raises:
        SurrogateNotReadyError: model or stats missing
        ValueError: resolution < 2
    """
    if model is None or stats is None:
        raise SurrogateNotReadyError("design space grid")
    if resolution < 2:
        raise ValueError(f"Grid resolution must be at least 2, got {resolution}")

    lwl_min, lwl_max = lwl_range or _DEFAULT_SWEEP.lwl.bounds
    beam_min, beam_max = beam_range or _DEFAULT_SWEEP.beam.bounds

    lwl_values = np.linspace(lwl_min, lwl_max, resolution)
    beam_values = np.linspace(beam_min, beam_max, resolution)

    # LWL outer, beam inner
    inputs = np.array([
        encode_inputs(fixed_params.replace(lwl=float(lwl), beam=float(beam)))
        for lwl in lwl_values
        for beam in beam_values
    ])

    outputs = stats.denormalize_outputs(
        predict_batch(model, stats.normalize_inputs(inputs))
    )
    grid_shape = (resolution, resolution)

    logger.debug(f"Design space grid computed at {resolution}x{resolution}")

    return DesignSpaceGrid(
        lwl_values=lwl_values,
        beam_values=beam_values,
        gm_grid=outputs[:, 0].reshape(grid_shape),
        hull_speed_grid=outputs[:, 1].reshape(grid_shape),
        draft_grid=outputs[:, 3].reshape(grid_shape),
    )
