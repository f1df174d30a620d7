"""
Tolerance tiers for numerical comparison.

Defines precision expectations per element type:
- FP64: double precision, a few ulps of accumulated rounding
- FP32: single precision, relaxed accordingly
- EXACT: integer element types, no rounding at all

Used by Matrix.allclose() and by the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, elimination-level rounding',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision, elimination-level rounding',
)

EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='integer arithmetic, results must match exactly',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier appropriate for an element type."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        return EXACT
    if np.finfo(dtype).bits <= 32:
        return FP32
    return FP64


def is_close(
    a: float,
    b: float,
    rtol: float = FP64.rtol,
    atol: float = FP64.atol,
) -> bool:
    """
    Check if two scalars are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|
    """
    return bool(abs(a - b) <= atol + rtol * abs(b))
