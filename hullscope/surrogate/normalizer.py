"""
normalizer.py - Z-score normalization for surrogate inputs and outputs

Statistics are computed once from the training set and frozen alongside the
model; inference must use the same statistics the network was trained on.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

__all__ = [
    'NormalizationStats',
    'compute_stats',
    'compute_normalization_stats',
    'normalize',
    'denormalize',
]


def _frozen(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class NormalizationStats:
    """Per-feature mean and std for the input and output vectors."""
    input_mean: np.ndarray
    input_std: np.ndarray
    output_mean: np.ndarray
    output_std: np.ndarray

    def __post_init__(self):
        for name in ("input_mean", "input_std", "output_mean", "output_std"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

        if self.input_mean.shape != self.input_std.shape:
            raise ValueError("input_mean and input_std must have the same shape")
        if self.output_mean.shape != self.output_std.shape:
            raise ValueError("output_mean and output_std must have the same shape")

    def normalize_inputs(self, inputs: np.ndarray) -> np.ndarray:
        return normalize(inputs, self.input_mean, self.input_std)

    def normalize_outputs(self, outputs: np.ndarray) -> np.ndarray:
        return normalize(outputs, self.output_mean, self.output_std)

    def denormalize_outputs(self, outputs: np.ndarray) -> np.ndarray:
        return denormalize(outputs, self.output_mean, self.output_std)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizationStats):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, name), getattr(other, name))
            for name in ("input_mean", "input_std", "output_mean", "output_std")
        )

    __hash__ = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_mean": self.input_mean.tolist(),
            "input_std": self.input_std.tolist(),
            "output_mean": self.output_mean.tolist(),
            "output_std": self.output_std.tolist(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NormalizationStats":
        return cls(
            input_mean=data["input_mean"],
            input_std=data["input_std"],
            output_mean=data["output_mean"],
            output_std=data["output_std"],
        )


def compute_stats(data: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Column-wise mean and population standard deviation.

    A column with zero spread gets std 1 so normalization leaves it
    centred instead of dividing by zero.

    Args:
        data: (N, D) matrix with N >= 1

    Returns:
        Tuple of (mean, std), each of shape (D,)
    """
    data = np.asarray(data, dtype=np.float64)
    if data.ndim != 2 or data.shape[0] == 0:
        raise ValueError(f"Expected a non-empty 2-D matrix, got shape {data.shape}")

    mean = data.mean(axis=0)
    std = data.std(axis=0)  # ddof=0, population
    std = np.where(std == 0.0, 1.0, std)
    return mean, std


def compute_normalization_stats(
    inputs: np.ndarray,
    outputs: np.ndarray,
) -> NormalizationStats:
    """Statistics for both sides of a training set."""
    input_mean, input_std = compute_stats(inputs)
    output_mean, output_std = compute_stats(outputs)
    return NormalizationStats(
        input_mean=input_mean,
        input_std=input_std,
        output_mean=output_mean,
        output_std=output_std,
    )


def normalize(values: np.ndarray, mean: np.ndarray, std: np.ndarray) -> np.ndarray:
    """(v - mean) / std, broadcast over a vector or a batch of rows."""
    return (np.asarray(values, dtype=np.float64) - mean) / std


def denormalize(values: np.ndarray, mean: np.ndarray, std: np.ndarray) -> np.ndarray:
    """v * std + mean; inverse of normalize."""
    return np.asarray(values, dtype=np.float64) * std + mean
