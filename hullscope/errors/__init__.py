"""
errors/ - HullScope error taxonomy

Structured exceptions for invalid parameters, an unavailable surrogate and
failed training runs.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorSeverity,
    HullScopeError,
    ParameterBoundsError,
    SurrogateNotReadyError,
    TrainingInProgressError,
    TrainingFailedError,
)

__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "HullScopeError",
    "ParameterBoundsError",
    "SurrogateNotReadyError",
    "TrainingInProgressError",
    "TrainingFailedError",
]
