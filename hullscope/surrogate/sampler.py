"""
sampler.py - Parameter-space sampler

Sweeps the design space on a fixed grid and labels every point with the
physics engine, producing the surrogate's training set.

Input vector (7):  lwl, beam, depth, hull_code, deadrise, total_load, engine_hp
Output vector (4): gm, hull_speed, max_speed, draft
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import islice, product
from typing import Iterator, List, Optional, Sequence
import logging

import numpy as np

from hullscope.core.coefficients import HULL_TYPE_CODES
from hullscope.core.enums import BallastType, HullType
from hullscope.core.params import HullParams
from hullscope.physics.engine import compute_physics
from hullscope.physics.results import PhysicsResults
from hullscope.surrogate.config import SweepConfig

__all__ = [
    'INPUT_FEATURES',
    'OUTPUT_FEATURES',
    'INPUT_DIM',
    'OUTPUT_DIM',
    'TrainingDataset',
    'encode_hull_type',
    'encode_inputs',
    'encode_outputs',
    'iter_sweep_params',
    'generate_training_data',
]

logger = logging.getLogger(__name__)


INPUT_FEATURES = (
    "lwl", "beam", "depth", "hull_code", "deadrise", "total_load", "engine_hp",
)
OUTPUT_FEATURES = ("gm", "hull_speed", "max_speed", "draft")

INPUT_DIM = len(INPUT_FEATURES)
OUTPUT_DIM = len(OUTPUT_FEATURES)


@dataclass(frozen=True, eq=False)
class TrainingDataset:
    """Paired input/output matrices, one row per swept design."""
    inputs: np.ndarray   # (N, INPUT_DIM)
    outputs: np.ndarray  # (N, OUTPUT_DIM)

    def __post_init__(self):
        if self.inputs.shape[0] != self.outputs.shape[0]:
            raise ValueError(
                f"Row count mismatch: {self.inputs.shape[0]} inputs, "
                f"{self.outputs.shape[0]} outputs"
            )

    def __len__(self) -> int:
        return int(self.inputs.shape[0])

    @classmethod
    def concatenate(cls, parts: Sequence["TrainingDataset"]) -> "TrainingDataset":
        """Join consecutive sweep slices back into one dataset."""
        if not parts:
            return cls(
                inputs=np.empty((0, INPUT_DIM), dtype=np.float64),
                outputs=np.empty((0, OUTPUT_DIM), dtype=np.float64),
            )
        return cls(
            inputs=np.concatenate([p.inputs for p in parts]),
            outputs=np.concatenate([p.outputs for p in parts]),
        )


# =============================================================================
# ENCODING
# =============================================================================

def encode_hull_type(hull_type: HullType) -> float:
    """Ordinal code on [0, 1] for the network input."""
    return HULL_TYPE_CODES[HullType(hull_type)]


def encode_inputs(params: HullParams) -> List[float]:
    """Build the 7-feature input vector for a design."""
    return [
        params.lwl,
        params.beam,
        params.depth,
        encode_hull_type(params.hull_type),
        params.deadrise,
        params.total_load,
        params.engine_hp,
    ]


def encode_outputs(results: PhysicsResults) -> List[float]:
    """Build the 4-feature target vector from physics results."""
    return [
        results.gm,
        results.hull_speed,
        results.max_speed,
        results.draft,
    ]


# =============================================================================
# SWEEP
# =============================================================================

def _sweep_points(config: SweepConfig) -> Iterator[tuple]:
    return product(
        config.lwl.values(),
        config.beam.values(),
        config.depth.values(),
        config.hull_types,
        config.total_load.values(),
        config.engine_hp.values(),
    )


def _design_at(point: tuple, config: SweepConfig, base: HullParams) -> HullParams:
    lwl, beam, depth, hull_type, total_load, engine_hp = point
    crew = min(total_load * config.crew_fraction, config.crew_ceiling_kg)
    return base.replace(
        lwl=lwl,
        beam=beam,
        depth=depth,
        hull_type=hull_type,
        deadrise=config.deadrise,
        crew_weight=crew,
        cargo_weight=total_load - crew,
        ballast_type=BallastType.NONE,
        ballast_weight=0.0,
        ballast_height=config.ballast_height,
        engine_hp=engine_hp,
    )


def iter_sweep_params(
    config: Optional[SweepConfig] = None,
    base: Optional[HullParams] = None,
    start: int = 0,
    stop: Optional[int] = None,
) -> Iterator[HullParams]:
    """
    Yield every design in the sweep, in deterministic order.

    Nesting (outer to inner): lwl, beam, depth, hull type, total load,
    engine hp. Parameters outside the sweep keep their values from base.
    start/stop select a slice of that order.
    """
    config = config or SweepConfig()
    base = base or HullParams()

    for point in islice(_sweep_points(config), start, stop):
        yield _design_at(point, config, base)


def generate_training_data(
    config: Optional[SweepConfig] = None,
    base: Optional[HullParams] = None,
    start: int = 0,
    stop: Optional[int] = None,
) -> TrainingDataset:
    """
    Label swept designs with the physics engine.

    Args:
        config: Sweep bounds (defaults give 43,560 samples)
        base: Design supplying the parameters that are not swept
        start: Index of the first design to label
        stop: Index one past the last design, None for the end of the sweep

    Returns:
        TrainingDataset with float64 matrices in sweep order
    """
    config = config or SweepConfig()
    total = config.sample_count
    stop = total if stop is None else max(0, min(stop, total))
    start = min(max(start, 0), stop)
    expected = stop - start

    inputs = np.empty((expected, INPUT_DIM), dtype=np.float64)
    outputs = np.empty((expected, OUTPUT_DIM), dtype=np.float64)

    count = 0
    for params in iter_sweep_params(config, base, start, stop):
        inputs[count] = encode_inputs(params)
        outputs[count] = encode_outputs(compute_physics(params))
        count += 1

    if expected == total:
        logger.info(f"Generated {count} training samples")
    else:
        logger.debug(f"Labelled sweep designs {start}..{start + count} of {total}")
    return TrainingDataset(inputs=inputs[:count], outputs=outputs[:count])
