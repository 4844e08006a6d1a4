"""
errors/taxonomy.py - HullScope error taxonomy

Structured error types for parameter validation and the surrogate
pipeline. Every error carries a code, category, severity and recovery hint
so hosts can decide whether to clamp, retry or give up.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum


# =============================================================================
# ERROR CATEGORIES AND SEVERITY
# =============================================================================

class ErrorCategory(Enum):
    """Categories of HullScope errors."""
    PARAMETER = "parameter"    # Design parameter outside its declared domain
    SURROGATE = "surrogate"    # Surrogate model unavailable or unusable
    TRAINING = "training"      # Surrogate training failed


class ErrorSeverity(Enum):
    """Severity levels."""
    ERROR = "error"       # Operation failed, cannot continue
    WARNING = "warning"   # Operation can continue after caller action
    INFO = "info"


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class HullScopeError(Exception):
    """
    Base class for HullScope errors.

    Provides:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the caller
    - Detail context for debugging
    """

    code: str = "HULL_000"
    category: ErrorCategory = ErrorCategory.PARAMETER
    severity: ErrorSeverity = ErrorSeverity.ERROR
    recoverable: bool = True

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "HullScope error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for host display."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recoverable": self.recoverable,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class ParameterBoundsError(HullScopeError):
    """Hull parameter outside its declared domain."""

    code = "HULL_001"
    category = ErrorCategory.PARAMETER
    severity = ErrorSeverity.WARNING

    def __init__(
        self,
        violations: List[Tuple[str, float, Tuple[float, float]]],
        **kwargs,
    ):
        param, value, valid_range = violations[0]
        message = f"Parameter '{param}' value {value} outside valid range {valid_range}"
        if len(violations) > 1:
            message += f" (+{len(violations) - 1} more)"

        super().__init__(
            message=message,
            recovery_hint="Clamp parameters to their declared bounds before computing.",
            violations=[
                {"param": p, "value": v, "valid_range": list(r)}
                for p, v, r in violations
            ],
            **kwargs,
        )
        self.violations = violations


class SurrogateNotReadyError(HullScopeError):
    """Surrogate model or normalization stats not available."""

    code = "HULL_101"
    category = ErrorCategory.SURROGATE
    severity = ErrorSeverity.ERROR

    def __init__(self, operation: str = "", **kwargs):
        message = "Surrogate model not trained yet"
        if operation:
            message += f": cannot run {operation}"
        super().__init__(
            message=message,
            recovery_hint="Wait for surrogate training to complete, then retry.",
            operation=operation,
            **kwargs,
        )


class TrainingInProgressError(HullScopeError):
    """A training run is already in flight on this trainer."""

    code = "HULL_102"
    category = ErrorCategory.TRAINING
    severity = ErrorSeverity.WARNING

    def __init__(self, **kwargs):
        super().__init__(
            message="Surrogate training already in progress",
            recovery_hint="Await the running training job instead of starting another.",
            **kwargs,
        )


class TrainingFailedError(HullScopeError):
    """Surrogate training aborted."""

    code = "HULL_103"
    category = ErrorCategory.TRAINING
    severity = ErrorSeverity.ERROR
    recoverable = False

    def __init__(self, stage: str, reason: str = "", **kwargs):
        message = f"Surrogate training failed during {stage}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            recovery_hint="Start a fresh training run.",
            stage=stage,
            reason=reason,
            **kwargs,
        )
