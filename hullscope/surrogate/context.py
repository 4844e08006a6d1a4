"""
context.py - Trained surrogate bundle

A SurrogateContext holds a trained network together with the statistics it
was trained on. It is only ever built fully formed at the end of training,
so holding one means the surrogate is ready.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from torch import nn

from hullscope.core.params import HullParams
from hullscope.surrogate.inference import (
    DesignSpaceGrid,
    SurrogatePrediction,
    generate_design_space_grid,
    predict_with_surrogate,
)
from hullscope.surrogate.normalizer import NormalizationStats

__all__ = ['SurrogateContext']


@dataclass(frozen=True, eq=False)
class SurrogateContext:
    """
    Trained model, its normalization statistics and training metadata.

    Compared by identity: two runs are different surrogates even when their
    weights happen to match.
    """
    model: nn.Module
    stats: NormalizationStats

    epochs: int
    final_loss: float
    final_val_loss: Optional[float]
    sample_count: int
    trained_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def predict(self, params: HullParams) -> Optional[SurrogatePrediction]:
        return predict_with_surrogate(self.model, self.stats, params)

    def design_space(
        self,
        fixed_params: HullParams,
        resolution: int = 40,
        **ranges,
    ) -> DesignSpaceGrid:
        return generate_design_space_grid(
            self.model, self.stats, fixed_params, resolution, **ranges
        )

    def to_dict(self) -> Dict[str, Any]:
        """Training metadata; the network itself is not serialized."""
        return {
            "epochs": self.epochs,
            "final_loss": self.final_loss,
            "final_val_loss": self.final_val_loss,
            "sample_count": self.sample_count,
            "trained_at": self.trained_at.isoformat(),
            "stats": self.stats.to_dict(),
        }
