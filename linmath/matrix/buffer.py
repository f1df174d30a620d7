"""
ContiguousBuffer: flat row-major element storage.

Owns a 1-D numpy array of ``rows * cols`` elements. Knows nothing about
row permutations; those live one layer up in Matrix, which keeps the
elements here in place and only permutes a table of row offsets.
"""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from linmath.core.validation import (
    check_dtype,
    check_matrix_array,
    check_scalar,
    check_size,
    is_integral,
)


class ContiguousBuffer:
    """
    Dense row-major storage of ``rows x cols`` elements of one dtype.

    Element ``(i, j)`` lives at flat offset ``i * cols + j``. Bounds are a
    caller contract; out-of-range access raises whatever numpy raises.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        value: Any = 0,
        dtype: DTypeLike = np.float64,
    ):
        self._rows = check_size(rows, "rows")
        self._cols = check_size(cols, "cols")
        self._dtype = check_dtype(dtype)
        self._data: NDArray[Any] = np.full(self._rows * self._cols, value, dtype=self._dtype)

    # --- Factories ---

    @classmethod
    def _adopt(cls, rows: int, cols: int, data: NDArray[Any]) -> ContiguousBuffer:
        """Wrap an existing flat array without copying."""
        buf = cls.__new__(cls)
        buf._rows = rows
        buf._cols = cols
        buf._dtype = data.dtype
        buf._data = data
        return buf

    @classmethod
    def from_iterable(
        cls,
        rows: int,
        cols: int,
        values: Iterable[Any],
        dtype: DTypeLike = np.float64,
    ) -> ContiguousBuffer:
        """
        Fill in row-major order from any iterable.

        Positions the input does not reach keep the default value 0.
        Input beyond ``rows * cols`` elements is neither stored nor consumed.
        """
        buf = cls(rows, cols, 0, dtype)
        taken = np.fromiter(islice(iter(values), buf.size), dtype=buf.dtype)
        buf._data[:taken.size] = taken
        return buf

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> ContiguousBuffer:
        """Copy a 2-D array-like into a new buffer."""
        arr = check_matrix_array(array, "array", dtype)
        rows, cols = arr.shape
        return cls._adopt(rows, cols, np.ascontiguousarray(arr).reshape(-1).copy())

    @classmethod
    def zero(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> ContiguousBuffer:
        return cls(rows, cols, 0, dtype)

    @classmethod
    def unity(cls, size: int, dtype: DTypeLike = np.float64) -> ContiguousBuffer:
        """Square identity: ones on the diagonal, zeros elsewhere."""
        size = check_size(size, "size")
        dtype = check_dtype(dtype)
        return cls._adopt(size, size, np.eye(size, dtype=dtype).reshape(-1))

    # --- Observers ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the flat storage."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def row_offset(self, k: int) -> int:
        """Flat offset of the first element of physical row k."""
        return k * self._cols

    def segment(self, offset: int) -> NDArray[Any]:
        """Writable view of the ``cols`` elements starting at offset."""
        return self._data[offset:offset + self._cols]

    def take_rows(self, offsets: NDArray[np.intp]) -> NDArray[Any]:
        """
        Copy rows starting at the given offsets into a 2-D array.

        Returns shape ``(len(offsets), cols)``; the order of the result
        follows the order of offsets, not the physical layout.
        """
        index = np.asarray(offsets, dtype=np.intp)[:, np.newaxis] + np.arange(self._cols)
        return self._data[index]

    def _grid(self) -> NDArray[Any]:
        return self._data.reshape(self._rows, self._cols)

    def __getitem__(self, key):
        # buf[i, j] is an element, buf[i] a writable view of physical row i
        return self._grid()[key]

    def __setitem__(self, key, value) -> None:
        self._grid()[key] = value

    # --- Whole-buffer scalar arithmetic ---

    def scale_in_place(self, k: Any) -> None:
        """Multiply every element by k (converted to the element type)."""
        self._data *= check_scalar(k, "k", self._dtype)

    def divide_in_place(self, k: Any) -> None:
        """
        Divide every element by k.

        Floating dtypes follow IEEE semantics: dividing by zero yields
        inf or nan and raises nothing. Integral dtypes truncate toward
        zero; an integral zero divisor raises ZeroDivisionError.
        """
        k = check_scalar(k, "k", self._dtype)
        if not is_integral(self._dtype):
            with np.errstate(divide='ignore', invalid='ignore'):
                self._data /= k
            return

        if k == 0:
            raise ZeroDivisionError("integer division of matrix elements by zero")
        # floor division rounds negative quotients down; step them back toward zero
        with np.errstate(over='ignore'):
            quotient = self._data // k
        quotient[(quotient < 0) & (self._data % k != 0)] += 1
        self._data[:] = quotient

    def __imul__(self, k: Any) -> ContiguousBuffer:
        self.scale_in_place(k)
        return self

    def __itruediv__(self, k: Any) -> ContiguousBuffer:
        self.divide_in_place(k)
        return self

    # --- Copying and comparison ---

    def copy(self) -> ContiguousBuffer:
        return ContiguousBuffer._adopt(self._rows, self._cols, self._data.copy())

    def to_array(self) -> NDArray[Any]:
        """2-D copy in physical row order."""
        return self._grid().copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContiguousBuffer):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ContiguousBuffer(rows={self._rows}, cols={self._cols}, dtype={self._dtype})"
