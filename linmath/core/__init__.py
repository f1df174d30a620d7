"""
Core infrastructure for linmath.

Shared abstractions and utilities used by the matrix package.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from linmath.core.result import Result
from linmath.core.exceptions import (
    LinmathError,
    ValidationError,
    DimensionError,
    ShapeMismatch,
    NumericalError,
    SingularMatrixError,
    UnsupportedOperationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "LinmathError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatch",
    "NumericalError",
    "SingularMatrixError",
    "UnsupportedOperationError",
]
