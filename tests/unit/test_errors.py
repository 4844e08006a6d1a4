"""
tests/unit/test_errors.py - Tests for the HullScope error taxonomy.
"""

import pytest

from hullscope.errors import (
    ErrorCategory,
    ErrorSeverity,
    HullScopeError,
    ParameterBoundsError,
    SurrogateNotReadyError,
    TrainingFailedError,
    TrainingInProgressError,
)


class TestHullScopeError:
    """Test base error class."""

    def test_defaults(self):
        error = HullScopeError("something broke")
        assert error.code == "HULL_000"
        assert error.message == "something broke"
        assert error.details == {}

    def test_str_includes_code_and_hint(self):
        error = HullScopeError("bad", recovery_hint="try again")
        assert str(error) == "[HULL_000] bad Hint: try again"

    def test_kwargs_land_in_details(self):
        error = HullScopeError("bad", details={"a": 1}, b=2)
        assert error.details == {"a": 1, "b": 2}

    def test_to_dict(self):
        data = SurrogateNotReadyError().to_dict()
        assert data["code"] == "HULL_101"
        assert data["category"] == "surrogate"
        assert data["severity"] == "error"
        assert data["recoverable"] is True


class TestSpecificErrors:
    """Test concrete error types."""

    def test_parameter_bounds_error(self):
        error = ParameterBoundsError([("beam", 3.5, (1.2, 2.8))])
        assert error.code == "HULL_001"
        assert error.category == ErrorCategory.PARAMETER
        assert error.severity == ErrorSeverity.WARNING
        assert "beam" in str(error)
        assert error.details["violations"][0]["valid_range"] == [1.2, 2.8]

    def test_not_ready_mentions_operation(self):
        error = SurrogateNotReadyError("design space grid")
        assert "design space grid" in error.message
        assert error.details["operation"] == "design space grid"

    def test_training_in_progress(self):
        error = TrainingInProgressError()
        assert error.code == "HULL_102"
        assert error.category == ErrorCategory.TRAINING

    def test_training_failed_not_recoverable(self):
        error = TrainingFailedError("training", reason="loss diverged")
        assert error.code == "HULL_103"
        assert error.recoverable is False
        assert "training" in error.message
        assert "loss diverged" in error.message

    def test_all_are_hullscope_errors(self):
        for cls in (ParameterBoundsError, SurrogateNotReadyError,
                    TrainingInProgressError, TrainingFailedError):
            assert issubclass(cls, HullScopeError)

    def test_catchable_as_exception(self):
        with pytest.raises(HullScopeError):
            raise SurrogateNotReadyError()
