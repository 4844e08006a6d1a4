"""
trainer.py - Surrogate training

Runs the sweep → normalize → train pipeline without blocking the event loop.
Data generation (in chunks) and every epoch execute in a worker thread;
progress events are delivered on the loop between those steps.

SurrogateTrainer performs one run. SurrogateService owns the published
SurrogateContext and guarantees at most one run at a time; train_surrogate
applies the same guard process-wide.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Union
import asyncio
import inspect
import logging
import threading

import numpy as np
import torch
from torch import nn

from hullscope.core.params import HullParams
from hullscope.errors import (
    SurrogateNotReadyError,
    TrainingFailedError,
    TrainingInProgressError,
)
from hullscope.surrogate.config import TrainingConfig
from hullscope.surrogate.context import SurrogateContext
from hullscope.surrogate.inference import DesignSpaceGrid, SurrogatePrediction
from hullscope.surrogate.model import build_model
from hullscope.surrogate.normalizer import compute_normalization_stats
from hullscope.surrogate.sampler import TrainingDataset, generate_training_data

__all__ = [
    'GenerationProgress',
    'TrainingProgress',
    'ProgressEvent',
    'ProgressCallback',
    'split_validation',
    'SurrogateTrainer',
    'SurrogateService',
    'train_surrogate',
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationProgress:
    """Emitted after every labelled chunk of the parameter sweep."""
    completed: int      # designs labelled so far
    total: int

    stage = "data generation"

    @property
    def fraction(self) -> float:
        return self.completed / self.total if self.total else 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage,
            "completed": self.completed,
            "total": self.total,
        }


@dataclass(frozen=True)
class TrainingProgress:
    """Emitted after every completed epoch."""
    epoch: int          # 1-based
    total_epochs: int
    loss: float         # mean training MSE over the epoch
    val_loss: Optional[float] = None

    stage = "training"

    @property
    def fraction(self) -> float:
        return self.epoch / self.total_epochs if self.total_epochs else 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "epoch": self.epoch,
            "total_epochs": self.total_epochs,
            "loss": self.loss,
            "val_loss": self.val_loss,
        }


ProgressEvent = Union[GenerationProgress, TrainingProgress]
ProgressCallback = Callable[[ProgressEvent], Union[None, Awaitable[None]]]


async def _emit(on_progress: Optional[ProgressCallback], progress: ProgressEvent) -> None:
    if on_progress is None:
        return
    result = on_progress(progress)
    if inspect.isawaitable(result):
        await result


def split_validation(
    inputs: np.ndarray,
    outputs: np.ndarray,
    validation_split: float,
) -> Tuple[Tuple[np.ndarray, np.ndarray], Optional[Tuple[np.ndarray, np.ndarray]]]:
    """
    Hold out the trailing fraction of rows for validation.

    The split happens before any shuffling, so the held-out rows are the
    same for every epoch.

    Returns:
        ((train_x, train_y), (val_x, val_y) or None)
    """
    if not 0.0 <= validation_split < 1.0:
        raise ValueError(f"validation_split must be in [0, 1), got {validation_split}")

    split_at = int(np.floor(len(inputs) * (1.0 - validation_split)))
    if split_at >= len(inputs):
        return (inputs, outputs), None
    if split_at == 0:
        raise ValueError("validation_split leaves no training rows")

    return (
        (inputs[:split_at], outputs[:split_at]),
        (inputs[split_at:], outputs[split_at:]),
    )


# =============================================================================
# SINGLE TRAINING RUN
# =============================================================================

class SurrogateTrainer:
    """
    Trains one surrogate from scratch.

    The trainer is not re-entrant: calling train() while a run is in flight
    raises TrainingInProgressError.
    """

    def __init__(
        self,
        config: Optional[TrainingConfig] = None,
        base_params: Optional[HullParams] = None,
    ):
        self.config = config or TrainingConfig()
        self._base_params = base_params
        self._running = False
        self.stage = "idle"

    @property
    def is_running(self) -> bool:
        return self._running

    async def train(self, on_progress: Optional[ProgressCallback] = None) -> SurrogateContext:
        """
        Generate data, fit the network and bundle the result.

        Args:
            on_progress: Called on the event loop with a GenerationProgress
                after every labelled sweep chunk, then a TrainingProgress
                after every epoch; may be a plain function or a coroutine
                function

        Returns:
            Fully formed SurrogateContext
        """
        if self._running:
            raise TrainingInProgressError()

        self._running = True
        try:
            return await self._train(on_progress)
        finally:
            self._running = False

    async def _train(self, on_progress: Optional[ProgressCallback]) -> SurrogateContext:
        config = self.config

        self.stage = "data generation"
        dataset = await self._generate(on_progress)
        if len(dataset) == 0:
            raise ValueError("Parameter sweep produced no samples")

        self.stage = "normalization"
        stats = compute_normalization_stats(dataset.inputs, dataset.outputs)
        x = stats.normalize_inputs(dataset.inputs).astype(np.float32)
        y = stats.normalize_outputs(dataset.outputs).astype(np.float32)

        (train_x, train_y), validation = split_validation(x, y, config.validation_split)
        train_x_t = torch.from_numpy(train_x)
        train_y_t = torch.from_numpy(train_y)
        val_tensors = None
        if validation is not None:
            val_tensors = (torch.from_numpy(validation[0]), torch.from_numpy(validation[1]))

        self.stage = "training"
        model = build_model(config.hidden_layers, seed=config.seed)
        optimizer = torch.optim.Adam(model.parameters(), lr=config.learning_rate)
        loss_fn = nn.MSELoss()
        generator = torch.Generator().manual_seed(config.seed)

        logger.info(
            f"Training surrogate: {len(train_x)} train / "
            f"{0 if validation is None else len(validation[0])} validation samples, "
            f"{config.epochs} epochs"
        )

        loss = float("nan")
        val_loss: Optional[float] = None
        for epoch in range(1, config.epochs + 1):
            loss, val_loss = await asyncio.to_thread(
                self._run_epoch,
                model, optimizer, loss_fn,
                train_x_t, train_y_t, val_tensors,
                generator,
            )
            logger.debug(
                f"Epoch {epoch}/{config.epochs}: loss={loss:.6f}"
                + (f" val_loss={val_loss:.6f}" if val_loss is not None else "")
            )
            await _emit(on_progress, TrainingProgress(
                epoch=epoch,
                total_epochs=config.epochs,
                loss=loss,
                val_loss=val_loss,
            ))

        model.eval()
        self.stage = "complete"
        logger.info(f"Surrogate training complete: final loss {loss:.6f}")

        return SurrogateContext(
            model=model,
            stats=stats,
            epochs=config.epochs,
            final_loss=loss,
            final_val_loss=val_loss,
            sample_count=len(dataset),
        )

    async def _generate(self, on_progress: Optional[ProgressCallback]) -> TrainingDataset:
        """Label the sweep one chunk per worker-thread call."""
        sweep = self.config.sweep
        total = sweep.sample_count
        chunk = max(1, self.config.generation_chunk)
        logger.info(f"Generating training data ({total} designs)")

        parts = []
        for start in range(0, total, chunk):
            stop = min(start + chunk, total)
            part = await asyncio.to_thread(
                generate_training_data, sweep, self._base_params, start, stop
            )
            parts.append(part)
            await _emit(on_progress, GenerationProgress(completed=stop, total=total))

        return TrainingDataset.concatenate(parts)

    def _run_epoch(
        self,
        model: nn.Module,
        optimizer: torch.optim.Optimizer,
        loss_fn: nn.Module,
        train_x: torch.Tensor,
        train_y: torch.Tensor,
        validation: Optional[Tuple[torch.Tensor, torch.Tensor]],
        generator: torch.Generator,
    ) -> Tuple[float, Optional[float]]:
        """One pass over the training rows; returns (loss, val_loss)."""
        n = train_x.shape[0]
        batch_size = self.config.batch_size

        if self.config.shuffle:
            order = torch.randperm(n, generator=generator)
        else:
            order = torch.arange(n)

        model.train()
        total = 0.0
        for start in range(0, n, batch_size):
            idx = order[start:start + batch_size]
            optimizer.zero_grad()
            batch_loss = loss_fn(model(train_x[idx]), train_y[idx])
            batch_loss.backward()
            optimizer.step()
            total += batch_loss.item() * len(idx)

        val_loss = None
        if validation is not None:
            model.eval()
            with torch.no_grad():
                val_loss = loss_fn(model(validation[0]), validation[1]).item()

        return total / n, val_loss


async def _run(trainer: SurrogateTrainer, on_progress: Optional[ProgressCallback]) -> SurrogateContext:
    try:
        return await trainer.train(on_progress)
    except Exception as e:
        logger.exception(f"Surrogate training failed during {trainer.stage}")
        raise TrainingFailedError(stage=trainer.stage, reason=str(e)) from e


# =============================================================================
# SERVICE
# =============================================================================

class SurrogateService:
    """
    Single owner of the published surrogate.

    Readers see either no surrogate or a complete one; the context is swapped
    in one assignment under the lock once training finishes.
    """

    def __init__(
        self,
        config: Optional[TrainingConfig] = None,
        base_params: Optional[HullParams] = None,
    ):
        self.config = config or TrainingConfig()
        self._base_params = base_params
        self._lock = threading.Lock()
        self._context: Optional[SurrogateContext] = None
        self._training = False

    @property
    def context(self) -> Optional[SurrogateContext]:
        with self._lock:
            return self._context

    @property
    def is_ready(self) -> bool:
        return self.context is not None

    @property
    def is_training(self) -> bool:
        with self._lock:
            return self._training

    async def train(
        self,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Optional[SurrogateContext]:
        """
        Train and publish a new surrogate.

        Returns None without doing anything if a run is already in flight.

        Raises:
            TrainingFailedError: the run failed; any previously published
                surrogate stays in place
        """
        with self._lock:
            if self._training:
                logger.warning("Surrogate training already in progress, request ignored")
                return None
            self._training = True

        try:
            context = await _run(SurrogateTrainer(self.config, self._base_params), on_progress)
        finally:
            with self._lock:
                self._training = False

        with self._lock:
            self._context = context
        return context

    def reset(self) -> None:
        """Drop the published surrogate."""
        with self._lock:
            self._context = None

    def predict(self, params: HullParams) -> Optional[SurrogatePrediction]:
        """Surrogate prediction, or None while no surrogate is published."""
        context = self.context
        if context is None:
            logger.warning("Surrogate not trained yet, prediction unavailable")
            return None
        return context.predict(params)

    def design_space(
        self,
        fixed_params: HullParams,
        resolution: int = 40,
        **ranges,
    ) -> DesignSpaceGrid:
        """
        Raises:
            SurrogateNotReadyError: no surrogate published yet
        """
        context = self.context
        if context is None:
            raise SurrogateNotReadyError("design space grid")
        return context.design_space(fixed_params, resolution, **ranges)


# Process-wide guard for train_surrogate
_run_lock = threading.Lock()
_run_in_flight = False


async def train_surrogate(
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[TrainingConfig] = None,
    base_params: Optional[HullParams] = None,
) -> Optional[SurrogateContext]:
    """
    Train a surrogate outside any service and return its context.

    At most one such run is in flight per process. An overlapping call
    returns None without starting a second run.

    Raises:
        TrainingFailedError: the run failed
    """
    global _run_in_flight
    with _run_lock:
        if _run_in_flight:
            logger.warning("Surrogate training already in progress, request ignored")
            return None
        _run_in_flight = True

    try:
        return await _run(SurrogateTrainer(config, base_params), on_progress)
    finally:
        with _run_lock:
            _run_in_flight = False
