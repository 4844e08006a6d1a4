"""
config.py - Surrogate pipeline configuration

Parameter sweep bounds, training hyper-parameters and design-space grid
settings.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
import os

from hullscope.core.enums import HullType

__all__ = [
    'SweepRange',
    'SweepConfig',
    'TrainingConfig',
    'GridConfig',
]


# =============================================================================
# PARAMETER SWEEP
# =============================================================================

@dataclass(frozen=True)
class SweepRange:
    """Inclusive sweep from start to stop in fixed steps."""
    start: float
    stop: float
    step: float

    def values(self) -> Tuple[float, ...]:
        """
        Sweep values generated by integer index, so the sequence is the
        same on every run regardless of accumulated rounding.
        """
        if self.step <= 0:
            raise ValueError(f"Sweep step must be positive: {self.step}")
        count = int((self.stop - self.start) / self.step + 1e-9) + 1
        return tuple(self.start + i * self.step for i in range(count))

    @property
    def bounds(self) -> Tuple[float, float]:
        return (self.start, self.stop)


@dataclass(frozen=True)
class SweepConfig:
    """
    Training-set sweep over the design space.

    Deadrise is held fixed and the synthetic total load is split between
    crew and cargo, with crew capped at a ceiling.
    """

    lwl: SweepRange = SweepRange(6.0, 7.5, 0.15)
    beam: SweepRange = SweepRange(1.2, 2.0, 0.08)
    depth: SweepRange = SweepRange(0.6, 1.0, 0.1)
    total_load: SweepRange = SweepRange(150.0, 500.0, 70.0)
    engine_hp: SweepRange = SweepRange(15.0, 25.0, 5.0)

    hull_types: Tuple[HullType, ...] = field(default_factory=lambda: tuple(HullType))

    # Held fixed for training simplicity
    deadrise: float = 12.0
    ballast_height: float = 0.1

    # Load split: crew = min(load × fraction, ceiling), cargo = remainder
    crew_fraction: float = 0.6
    crew_ceiling_kg: float = 240.0

    @classmethod
    def from_env(cls) -> "SweepConfig":
        return cls(
            deadrise=float(os.getenv("HULLSCOPE_SWEEP_DEADRISE", "12.0")),
            ballast_height=float(os.getenv("HULLSCOPE_SWEEP_BALLAST_HEIGHT", "0.1")),
            crew_fraction=float(os.getenv("HULLSCOPE_SWEEP_CREW_FRACTION", "0.6")),
            crew_ceiling_kg=float(os.getenv("HULLSCOPE_SWEEP_CREW_CEILING_KG", "240.0")),
        )

    @property
    def sample_count(self) -> int:
        return (
            len(self.lwl.values())
            * len(self.beam.values())
            * len(self.depth.values())
            * len(self.hull_types)
            * len(self.total_load.values())
            * len(self.engine_hp.values())
        )


# =============================================================================
# TRAINING
# =============================================================================

@dataclass(frozen=True)
class TrainingConfig:
    """Surrogate network training hyper-parameters."""

    epochs: int = 50
    batch_size: int = 64
    learning_rate: float = 1e-3
    validation_split: float = 0.1
    shuffle: bool = True
    seed: int = 42

    # Designs labelled per worker-thread call during data generation
    generation_chunk: int = 4096

    hidden_layers: Tuple[int, ...] = (64, 32, 16)

    sweep: SweepConfig = field(default_factory=SweepConfig)

    @classmethod
    def from_env(cls) -> "TrainingConfig":
        return cls(
            epochs=int(os.getenv("HULLSCOPE_TRAIN_EPOCHS", "50")),
            batch_size=int(os.getenv("HULLSCOPE_TRAIN_BATCH_SIZE", "64")),
            learning_rate=float(os.getenv("HULLSCOPE_TRAIN_LEARNING_RATE", "0.001")),
            validation_split=float(os.getenv("HULLSCOPE_TRAIN_VALIDATION_SPLIT", "0.1")),
            shuffle=os.getenv("HULLSCOPE_TRAIN_SHUFFLE", "true").lower() == "true",
            seed=int(os.getenv("HULLSCOPE_TRAIN_SEED", "42")),
            generation_chunk=int(os.getenv("HULLSCOPE_TRAIN_GENERATION_CHUNK", "4096")),
            sweep=SweepConfig.from_env(),
        )


# =============================================================================
# DESIGN-SPACE GRID
# =============================================================================

@dataclass(frozen=True)
class GridConfig:
    """Design-space map settings."""

    resolution: int = 40

    @classmethod
    def from_env(cls) -> "GridConfig":
        return cls(
            resolution=int(os.getenv("HULLSCOPE_GRID_RESOLUTION", "40")),
        )
