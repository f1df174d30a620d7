"""
Input validation utilities for linmath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from linmath.core.exceptions import DimensionError, ValidationError


def check_dtype(dtype: DTypeLike, name: str = "dtype") -> np.dtype:
    """
    Validate a matrix element type.

    Only integer and real floating dtypes are accepted. ``bool`` is
    rejected even though NumPy treats it as integral: it has no useful
    arithmetic for linear algebra.

    Args:
        dtype: Anything ``np.dtype`` accepts
        name: Parameter name for error messages

    Returns:
        The normalised ``np.dtype``

    Raises:
        ValidationError: If the dtype is not integer or real floating
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {e}") from e

    if result == np.bool_:
        raise ValidationError(f"{name}: bool is not a numeric element type")
    if not (np.issubdtype(result, np.integer) or np.issubdtype(result, np.floating)):
        raise ValidationError(
            f"{name}: unsupported element type {result}, expected integer or floating"
        )
    return result


def is_integral(dtype: np.dtype) -> bool:
    """True for integer dtypes, where division is not closed."""
    return bool(np.issubdtype(dtype, np.integer))


def check_size(value: Any, name: str) -> int:
    """
    Validate a matrix dimension.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_scalar(value: Any, name: str, dtype: DTypeLike | None = None) -> Any:
    """
    Verify value is a real scalar.

    With ``dtype`` the scalar is also converted to that element type.
    Integer element types only accept scalars whose truncated value lies
    within the type's range.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages
        dtype: Optional element type to convert to

    Returns:
        value, converted to ``dtype`` when one is given

    Raises:
        ValidationError: If value is not a real number, or is not
            representable in dtype
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    if dtype is None:
        return value

    dtype = np.dtype(dtype)
    if is_integral(dtype):
        if isinstance(value, numbers.Integral):
            truncated = int(value)
        elif math.isfinite(value):
            truncated = math.trunc(value)
        else:
            truncated = None
        info = np.iinfo(dtype)
        if truncated is None or not info.min <= truncated <= info.max:
            raise ValidationError(
                f"{name}: {value} is not representable as {dtype}"
            )
    elif (
        isinstance(value, numbers.Integral)
        and abs(int(value)) > float(np.finfo(dtype).max)
    ):
        raise ValidationError(f"{name}: {value} is not representable as {dtype}")
    return dtype.type(value)


def check_matrix_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a 2-D numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target element type. If None, the input's own dtype is kept
               provided it is a supported element type.

    Returns:
        2-D numpy.ndarray with a supported dtype

    Raises:
        ValidationError: If input cannot be converted or has unsupported dtype
        DimensionError: If input is not 2-D
    """
    try:
        result = np.asarray(array) if dtype is None else np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )
    check_dtype(result.dtype, name)

    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}",
            expected=2,
            actual=result.ndim,
        )
    return result


def check_same_dtype(left: np.dtype, right: np.dtype, operation: str) -> None:
    """
    Verify two operands share an element type.

    Args:
        left: dtype of the left operand
        right: dtype of the right operand
        operation: Operation name for error messages

    Raises:
        ValidationError: If the dtypes differ
    """
    if left != right:
        raise ValidationError(
            f"{operation}: element types differ (left={left}, right={right})"
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have the same shape.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: mismatched matrix sizes {left} and {right}",
            expected=left,
            actual=right,
        )


def check_choice(value: Any, choices: Iterable[str], name: str) -> str:
    """
    Verify value is one of a fixed set of option strings.

    Raises:
        ValidationError: If value is not among choices
    """
    choices = tuple(choices)
    if value not in choices:
        raise ValidationError(f"{name} must be one of {choices}, got {value!r}")
    return value
