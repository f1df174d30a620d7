"""
Reductions over pairs of equal-length sequences.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from linmath.core.exceptions import DimensionError


def multiply_accumulate(a: ArrayLike, b: ArrayLike, init: Any = 0) -> Any:
    """
    Fused multiply-accumulate: ``init + sum(a[k] * b[k])``.

    The sum is folded strictly left to right, starting from init, in the
    operands' element type; overflow and rounding are whatever that type
    does natively.

    Args:
        a: First operand, 1-D
        b: Second operand, 1-D, same length as a
        init: Starting value of the accumulator

    Returns:
        numpy scalar of the operands' common dtype

    Raises:
        DimensionError: If a and b differ in length
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise DimensionError(
            f"multiply_accumulate: operand lengths differ ({a.shape} vs {b.shape})",
            expected=a.shape,
            actual=b.shape,
        )

    dtype = np.result_type(a, b)
    terms = np.empty(a.size + 1, dtype=dtype)
    terms[0] = init
    np.multiply(a.ravel(), b.ravel(), out=terms[1:])
    # cumsum adds sequentially, unlike sum()'s pairwise summation
    return np.cumsum(terms, dtype=dtype)[-1]
