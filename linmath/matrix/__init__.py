"""
Dense matrix module.

Public API:
    Matrix               - dense row-major matrix value type
    ContiguousBuffer     - flat element storage underneath a Matrix
    RowIndex             - permutable row-offset table
    transpose(M)         - transposed copy
    det(M)               - determinant with method, swaps and timing report
    multiply_accumulate  - ordered dot-product reducer
"""

from linmath.matrix.buffer import ContiguousBuffer
from linmath.matrix.rows import RowIndex
from linmath.matrix.reducers import multiply_accumulate
from linmath.matrix.matrix import Matrix, transpose
from linmath.matrix.solvers import det
from linmath.matrix.solution import DeterminantParams, DeterminantSolution

__all__ = [
    "Matrix",
    "ContiguousBuffer",
    "RowIndex",
    "transpose",
    "det",
    "multiply_accumulate",
    "DeterminantParams",
    "DeterminantSolution",
]
