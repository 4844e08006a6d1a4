"""
model.py - Surrogate network

Small fully-connected regressor approximating compute_physics on the
normalized 7-feature input space.
"""

from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
import torch
from torch import nn

from hullscope.surrogate.sampler import INPUT_DIM, OUTPUT_DIM

__all__ = [
    'SurrogateNetwork',
    'build_model',
    'predict_batch',
]


class SurrogateNetwork(nn.Module):
    """
    7 -> 64 -> 32 -> 16 -> 4 MLP.

    Hidden layers use ReLU with He-normal weights; the output layer is linear
    with Xavier-uniform weights. All biases start at zero.
    """

    def __init__(
        self,
        input_dim: int = INPUT_DIM,
        output_dim: int = OUTPUT_DIM,
        hidden_layers: Sequence[int] = (64, 32, 16),
    ):
        super().__init__()
        self.input_dim = input_dim
        self.output_dim = output_dim
        self.hidden_layers = tuple(hidden_layers)

        layers = []
        width = input_dim
        for units in self.hidden_layers:
            linear = nn.Linear(width, units)
            nn.init.kaiming_normal_(linear.weight, nonlinearity="relu")
            nn.init.zeros_(linear.bias)
            layers.extend([linear, nn.ReLU()])
            width = units

        head = nn.Linear(width, output_dim)
        nn.init.xavier_uniform_(head.weight)
        nn.init.zeros_(head.bias)
        layers.append(head)

        self.net = nn.Sequential(*layers)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.net(x)


def build_model(
    hidden_layers: Sequence[int] = (64, 32, 16),
    seed: Optional[int] = None,
) -> SurrogateNetwork:
    """Construct a freshly initialized network, seeded when seed is given."""
    if seed is not None:
        torch.manual_seed(seed)
    return SurrogateNetwork(hidden_layers=hidden_layers)


def predict_batch(model: nn.Module, inputs: np.ndarray) -> np.ndarray:
    """
    Forward a batch of normalized inputs.

    Args:
        model: Trained network
        inputs: (N, INPUT_DIM) normalized matrix

    Returns:
        (N, OUTPUT_DIM) normalized predictions as float64
    """
    batch = torch.as_tensor(np.asarray(inputs, dtype=np.float32))
    model.eval()
    with torch.no_grad():
        outputs = model(batch)
    return outputs.numpy().astype(np.float64)
