"""
Solver dispatch for determinants.

This module provides the det() function (public API): input conversion,
method selection, timing and the singularity report around the Matrix
determinant kernels.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike

from linmath.core.compute.timing import Timer
from linmath.core.exceptions import SingularMatrixError
from linmath.core.result import Result
from linmath.matrix.matrix import DeterminantMethod, Matrix
from linmath.matrix.solution import DeterminantParams, DeterminantSolution


def det(
    matrix: Matrix | ArrayLike,
    method: DeterminantMethod = 'auto',
    *,
    check_finite: bool = False,
) -> DeterminantSolution:
    """
    Compute the determinant of a square matrix.

    Unlike ``Matrix.determinant()``, which returns the bare value, det()
    reports the algorithm used, the row swaps and pivots, timings, and
    flags singular outcomes.

    Args:
        matrix: A Matrix, or any 2-D array-like (converted with
            Matrix.from_array, keeping its dtype)
        method: Algorithm to use:
            - 'auto': Gauss-Jordan for floating dtypes, Bareiss for integers
            - 'gauss_jordan': partial-pivoting elimination (floating only)
            - 'bareiss': exact fraction-free elimination (integral only)
        check_finite: If True, raise SingularMatrixError instead of
            returning a non-finite determinant

    Returns:
        DeterminantSolution with value, method, swaps, pivots and summary()

    Raises:
        ValidationError: If the input or method is invalid
        DimensionError: If the matrix is not square
        UnsupportedOperationError: If method does not suit the dtype
        SingularMatrixError: If check_finite=True and the result is not finite

    Example:
        >>> from linmath import det
        >>> result = det([[1.0, 2.0], [3.0, 4.0]])
        >>> float(result.value)
        -2.0
        >>> result.swaps
        1
    """
    if not isinstance(matrix, Matrix):
        matrix = Matrix.from_array(matrix)
    concrete = matrix._resolve_determinant_method(method)

    timer = Timer()
    timer.start()
    with timer.section('elimination'):
        value, swaps, pivots = matrix._determinant_parts(concrete)
    timer.stop()

    finite = bool(np.isfinite(value))
    messages: list[str] = []
    if not finite:
        if check_finite:
            raise SingularMatrixError(
                f"determinant is not finite ({value}): the matrix is singular",
                matrix_name='matrix',
                value=float(value),
            )
        messages.append(f"determinant is not finite ({value}); matrix is singular")
    elif value == 0:
        messages.append("determinant is exactly zero; matrix is singular")

    for message in messages:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    result = Result(
        params=DeterminantParams(value=value, swaps=swaps, pivots=pivots),
        info={
            'method': concrete,
            'rows': matrix.rows,
            'cols': matrix.cols,
            'dtype': str(matrix.dtype),
            'swaps': swaps,
            'singular': (not finite) or value == 0,
        },
        timing=timer.result(),
        method_name=concrete,
        warnings=tuple(messages),
    )
    return DeterminantSolution(result)
