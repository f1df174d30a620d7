"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from linmath.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=-2.0),
            info={"method": "gauss_jordan"},
            timing={"total_seconds": 0.01},
            method_name="gauss_jordan",
        )
        assert result.params.value == -2.0
        assert result.info["method"] == "gauss_jordan"
        assert result.timing["total_seconds"] == 0.01
        assert result.method_name == "gauss_jordan"

    def test_timing_optional(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, method_name="x")
        assert result.timing is None

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, method_name="x")
        assert result.warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, method_name="x")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2.0)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(0.0),
            info={},
            timing=None,
            method_name="x",
            warnings=("determinant is exactly zero; matrix is singular",),
        )
        assert result.has_warning("singular")
        assert not result.has_warning("overflow")
