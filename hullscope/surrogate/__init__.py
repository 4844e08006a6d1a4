"""
HullScope Surrogate

Neural approximation of the physics engine for fast design-space maps.

Pipeline: sweep the parameter space, label with compute_physics, normalize,
train a small MLP, then predict single designs or whole LWL × beam grids.
"""

from .config import (
    SweepRange,
    SweepConfig,
    TrainingConfig,
    GridConfig,
)

from .sampler import (
    INPUT_DIM,
    OUTPUT_DIM,
    TrainingDataset,
    encode_hull_type,
    encode_inputs,
    encode_outputs,
    iter_sweep_params,
    generate_training_data,
)

from .normalizer import (
    NormalizationStats,
    compute_stats,
    compute_normalization_stats,
    normalize,
    denormalize,
)

from .model import (
    SurrogateNetwork,
    build_model,
    predict_batch,
)

from .inference import (
    SurrogatePrediction,
    DesignSpaceGrid,
    predict_with_surrogate,
    generate_design_space_grid,
)

from .context import SurrogateContext

from .trainer import (
    GenerationProgress,
    TrainingProgress,
    ProgressEvent,
    SurrogateTrainer,
    SurrogateService,
    train_surrogate,
)

__all__ = [
    # Config
    "SweepRange",
    "SweepConfig",
    "TrainingConfig",
    "GridConfig",
    # Sampler
    "INPUT_DIM",
    "OUTPUT_DIM",
    "TrainingDataset",
    "encode_hull_type",
    "encode_inputs",
    "encode_outputs",
    "iter_sweep_params",
    "generate_training_data",
    # Normalizer
    "NormalizationStats",
    "compute_stats",
    "compute_normalization_stats",
    "normalize",
    "denormalize",
    # Model
    "SurrogateNetwork",
    "build_model",
    "predict_batch",
    # Inference
    "SurrogatePrediction",
    "DesignSpaceGrid",
    "predict_with_surrogate",
    "generate_design_space_grid",
    "SurrogateContext",
    # Training
    "GenerationProgress",
    "TrainingProgress",
    "ProgressEvent",
    "SurrogateTrainer",
    "SurrogateService",
    "train_surrogate",
]
