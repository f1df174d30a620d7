"""
linmath: dense matrices with O(1) row swaps.

A row-major matrix value type over numpy integer and floating dtypes,
with element-wise and matrix arithmetic, transpose, and determinants by
Gauss-Jordan elimination with partial pivoting (floating) or exact
Bareiss elimination (integral).

Submodules:
    matrix: Matrix, ContiguousBuffer, RowIndex, det, transpose
    core: exceptions, validation, result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from linmath.core.exceptions import (
    LinmathError,
    ValidationError,
    DimensionError,
    ShapeMismatch,
    NumericalError,
    SingularMatrixError,
    UnsupportedOperationError,
)
from linmath.matrix import (
    Matrix,
    ContiguousBuffer,
    RowIndex,
    transpose,
    det,
    multiply_accumulate,
    DeterminantSolution,
)

__all__ = [
    "__version__",
    "Matrix",
    "ContiguousBuffer",
    "RowIndex",
    "transpose",
    "det",
    "multiply_accumulate",
    "DeterminantSolution",
    "LinmathError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatch",
    "NumericalError",
    "SingularMatrixError",
    "UnsupportedOperationError",
]
