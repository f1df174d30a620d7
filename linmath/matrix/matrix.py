"""
Matrix: dense row-major matrix value type.

A Matrix composes a ContiguousBuffer (the elements, never moved by
pivoting) with a RowIndex (the offsets of each logical row inside the
buffer). Row swaps exchange two offsets, so partial pivoting during
Gauss-Jordan elimination costs O(1) per swap regardless of width.

Indexing, iteration, equality and arithmetic all work in logical row
order; the physical layout is only observable through ``row_index``.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Iterable, Iterator, Literal

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from linmath.core.compute.tolerances import select_tolerance
from linmath.core.exceptions import DimensionError, UnsupportedOperationError
from linmath.core.validation import (
    check_choice,
    check_same_dtype,
    check_same_shape,
    is_integral,
)
from linmath.matrix._bareiss import bareiss_determinant
from linmath.matrix.buffer import ContiguousBuffer
from linmath.matrix.reducers import multiply_accumulate
from linmath.matrix.rows import RowIndex


DeterminantMethod = Literal['auto', 'gauss_jordan', 'bareiss']
DETERMINANT_METHODS = ('auto', 'gauss_jordan', 'bareiss')


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Matrix:
    """
    Dense matrix over an integer or floating numpy dtype.

    Construct with ``Matrix(rows, cols, value=0, dtype=np.float64)`` or one
    of the factories (``from_iterable``, ``from_array``, ``from_buffer``,
    ``zero``, ``unity``). Every construction lays rows out in physical
    order: ``row_index[i] == i * cols``.

    ``M[i]`` is a writable numpy view of exactly ``cols`` elements of
    logical row i. It borrows the matrix storage and goes stale once the
    matrix is transposed or assigned a product.

    Examples:
        >>> a = Matrix.from_iterable(2, 2, [1, 2, 3, 4])
        >>> float(a.determinant())
        -2.0
        >>> (a * Matrix.unity(2)) == a
        True
    """

    # Make numpy defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        value: Any = 0,
        dtype: DTypeLike = np.float64,
    ):
        self._adopt_buffer(ContiguousBuffer(rows, cols, value, dtype))

    def _adopt_buffer(self, buffer: ContiguousBuffer) -> None:
        self._buffer = buffer
        self._row_index = RowIndex(buffer.rows, buffer.cols)

    # --- Factories ---

    @classmethod
    def from_buffer(cls, buffer: ContiguousBuffer) -> Matrix:
        """Take ownership of buffer without copying it."""
        matrix = cls.__new__(cls)
        matrix._adopt_buffer(buffer)
        return matrix

    @classmethod
    def from_iterable(
        cls,
        rows: int,
        cols: int,
        values: Iterable[Any],
        dtype: DTypeLike = np.float64,
    ) -> Matrix:
        """Row-major fill; short input is zero-padded, excess input ignored."""
        return cls.from_buffer(ContiguousBuffer.from_iterable(rows, cols, values, dtype))

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """Copy a 2-D array-like (nested lists, ndarray, another Matrix)."""
        return cls.from_buffer(ContiguousBuffer.from_array(array, dtype))

    @classmethod
    def zero(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
        return cls.from_buffer(ContiguousBuffer.zero(rows, cols, dtype))

    @classmethod
    def unity(cls, size: int, dtype: DTypeLike = np.float64) -> Matrix:
        return cls.from_buffer(ContiguousBuffer.unity(size, dtype))

    # --- Observers ---

    @property
    def rows(self) -> int:
        return self._buffer.rows

    @property
    def cols(self) -> int:
        return self._buffer.cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._buffer.shape

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    @property
    def square(self) -> bool:
        return self.rows == self.cols

    @property
    def row_index(self) -> tuple[int, ...]:
        """Buffer offset of each logical row, in logical order."""
        return tuple(self._row_index)

    def __len__(self) -> int:
        return self.rows

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._row(i)[j]
        return self._row(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._row(i)[j] = value
        else:
            self._row(key)[:] = value

    def _row(self, i: int) -> NDArray[Any]:
        if not isinstance(i, numbers.Integral):
            raise TypeError(f"row index must be an integer, got {type(i).__name__}")
        return self._buffer.segment(self._row_index[i])

    def __iter__(self) -> Iterator[NDArray[Any]]:
        for offset in self._row_index:
            yield self._buffer.segment(offset)

    def diagonal(self) -> NDArray[Any]:
        """Copy of ``M[i][i]`` for i below ``min(rows, cols)``."""
        n = min(self.rows, self.cols)
        return np.array([self._row(i)[i] for i in range(n)], dtype=self.dtype)

    def to_array(self) -> NDArray[Any]:
        """2-D copy in logical row order."""
        return self._buffer.take_rows(self._row_index.offsets)

    def tolist(self) -> list[list[Any]]:
        return self.to_array().tolist()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        array = self.to_array()
        return array if dtype is None else array.astype(dtype)

    def copy(self) -> Matrix:
        """Independent copy with rows re-laid out in logical order."""
        return Matrix.from_buffer(ContiguousBuffer.from_array(self.to_array(), self.dtype))

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def __repr__(self) -> str:
        body = np.array2string(self.to_array(), separator=', ')
        return f"Matrix({body}, dtype={self.dtype})"

    # --- Comparison ---

    def equal(self, other: Matrix) -> bool:
        """Same shape and every logical element compares equal."""
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.to_array(), other.to_array()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return not self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise comparison within tolerance.

        Defaults come from the tolerance tier of the wider of the two
        element types (exact for integers).
        """
        if self.shape != other.shape:
            return False
        tier = select_tolerance(np.result_type(self.dtype, other.dtype))
        return bool(np.allclose(
            self.to_array(),
            other.to_array(),
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # --- Row operations ---

    def swap_rows(self, a: int, b: int) -> None:
        """Exchange logical rows a and b. O(1); no element moves."""
        self._row_index.swap(a, b)

    def max_in_col_from(
        self,
        col: int,
        start_row: int,
        cmp: Callable[[Any, Any], bool] = operator.lt,
    ) -> tuple[int, Any]:
        """
        Pivot search over rows ``start_row .. rows-1`` of column col.

        A candidate replaces the current best when
        ``cmp(abs(best), abs(candidate))`` holds, so with the default
        strict ``<`` this is an argmax of absolute values that keeps the
        first row on ties.

        Returns:
            (row, signed element value at that row)

        Raises:
            IndexError: If col is out of range or no candidate rows remain
        """
        if not 0 <= col < self.cols:
            raise IndexError(f"column {col} out of range for {self.cols} columns")
        if not 0 <= start_row < self.rows:
            raise IndexError(f"start_row {start_row} out of range for {self.rows} rows")

        column = self._buffer.data[self._row_index.offsets[start_row:] + col]
        magnitudes = np.abs(column)
        best = 0
        for candidate in range(1, len(column)):
            if cmp(magnitudes[best], magnitudes[candidate]):
                best = candidate
        return start_row + best, column[best]

    def max_in_col(
        self,
        col: int,
        cmp: Callable[[Any, Any], bool] = operator.lt,
    ) -> tuple[int, Any]:
        """Pivot search over the whole column."""
        return self.max_in_col_from(col, 0, cmp)

    # --- Transformations ---

    def transpose(self) -> None:
        """
        Transpose in place.

        The shape becomes ``cols x rows`` and the row index is reset to
        physical order. Row views taken before the call no longer refer
        to this matrix.
        """
        self._adopt_buffer(ContiguousBuffer.from_array(self.to_array().T, self.dtype))

    @property
    def T(self) -> Matrix:
        return transpose(self)

    def gauss_jordan_elimination(self) -> int:
        """
        Gauss-Jordan elimination with partial pivoting, in place.

        For each pivot column i the row with the largest absolute value in
        column i among rows >= i is swapped into position i; then every
        other row r, above and below, has ``M[r][i] / pivot`` times row i
        subtracted from it. The pivot row itself is not normalised, so
        afterwards ``M[i][i]`` holds the pivot and the eliminated columns
        are zero off the diagonal up to rounding.

        Any shape is accepted; the sweep covers ``min(rows, cols)`` pivot
        columns. No singularity check is made: a zero pivot turns the
        affected entries into inf/nan under IEEE rules, silently.

        Returns:
            Number of row interchanges performed (swaps of a row with
            itself are not counted)

        Raises:
            UnsupportedOperationError: For integral element types
        """
        if is_integral(self.dtype):
            raise UnsupportedOperationError(
                f"Gauss-Jordan elimination divides by pivots and is not defined "
                f"for integral element type {self.dtype}",
                operation='gauss_jordan_elimination',
                dtype=str(self.dtype),
            )

        swaps = 0
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            for i in range(min(self.rows, self.cols)):
                pivot_row, pivot = self.max_in_col_from(i, i)
                if pivot_row != i:
                    self.swap_rows(i, pivot_row)
                    swaps += 1

                pivot_values = self._row(i)
                for r in range(self.rows):
                    if r == i:
                        continue
                    row = self._row(r)
                    row -= (row[i] / pivot) * pivot_values
        return swaps

    # --- Determinant ---

    def _resolve_determinant_method(self, method: str) -> str:
        """Validate a determinant request and pick the concrete algorithm."""
        check_choice(method, DETERMINANT_METHODS, 'method')
        if not self.square:
            raise DimensionError(
                f"determinant: matrix must be square, got {self.rows}x{self.cols}",
                expected=(self.rows, self.rows),
                actual=self.shape,
            )

        integral = is_integral(self.dtype)
        if method == 'auto':
            return 'bareiss' if integral else 'gauss_jordan'
        if method == 'gauss_jordan' and integral:
            raise UnsupportedOperationError(
                f"determinant via Gauss-Jordan is not defined for integral "
                f"element type {self.dtype}; use method='bareiss' or 'auto'",
                operation='determinant',
                dtype=str(self.dtype),
            )
        if method == 'bareiss' and not integral:
            raise UnsupportedOperationError(
                f"Bareiss determinant requires an integral element type, got {self.dtype}",
                operation='determinant',
                dtype=str(self.dtype),
            )
        return method

    def _determinant_parts(self, method: str) -> tuple[Any, int, tuple[float, ...] | None]:
        """
        Run a resolved determinant algorithm on a copy of the elements.

        Returns (value, swaps, pivots); pivots is the reduced diagonal for
        Gauss-Jordan and None for Bareiss.
        """
        if method == 'bareiss':
            exact, swaps = bareiss_determinant(self.tolist())
            return integral_result(exact, self.dtype), swaps, None

        work = self.copy()
        swaps = work.gauss_jordan_elimination()
        diagonal = work.diagonal()
        pivots = tuple(float(p) for p in diagonal)
        return signed_diagonal_product(diagonal, swaps), swaps, pivots

    def determinant(self, method: DeterminantMethod = 'auto') -> Any:
        """
        Determinant of a square matrix.

        Floating element types: a working copy is reduced by
        gauss_jordan_elimination() and the product of its diagonal is
        taken, negated when an odd number of row swaps occurred. A
        singular matrix gives 0, inf or nan rather than an error.

        Integral element types: exact fraction-free (Bareiss) elimination.
        The result is converted back to the element type and raises
        OverflowError if it does not fit.

        Args:
            method: 'auto' (by element type), 'gauss_jordan' or 'bareiss'

        Returns:
            numpy scalar of the matrix dtype

        Raises:
            DimensionError: If the matrix is not square
            UnsupportedOperationError: If method does not suit the dtype
            ValidationError: If method is unknown
        """
        value, _, _ = self._determinant_parts(self._resolve_determinant_method(method))
        return value

    # --- In-place arithmetic ---

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._multiply_in_place(other)
        elif _is_scalar(other):
            self._buffer.scale_in_place(other)
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        self._buffer.divide_in_place(other)
        return self

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_elementwise(other, 'addition')
        for row, other_row in zip(self, other):
            row += other_row
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_elementwise(other, 'subtraction')
        for row, other_row in zip(self, other):
            row -= other_row
        return self

    def __imatmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._multiply_in_place(other)
        return self

    def _check_elementwise(self, other: Matrix, operation: str) -> None:
        check_same_shape(self.shape, other.shape, operation)
        check_same_dtype(self.dtype, other.dtype, operation)

    def _multiply_in_place(self, other: Matrix) -> None:
        """
        Matrix product, committed only after the result is complete.

        The right operand is transposed so each result element is a
        row-by-row dot product.
        """
        if self.cols != other.rows:
            raise DimensionError(
                f"multiplication: mismatched matrix sizes {self.rows}x{self.cols} "
                f"and {other.rows}x{other.cols}",
                expected=(self.cols, other.cols),
                actual=other.shape,
            )
        check_same_dtype(self.dtype, other.dtype, 'multiplication')

        transposed = transpose(other)
        result = Matrix(self.rows, other.cols, 0, self.dtype)
        zero = self.dtype.type(0)
        for i, left in enumerate(self):
            out = result._row(i)
            for j, right in enumerate(transposed):
                out[j] = multiply_accumulate(left, right, zero)

        self._buffer, self._row_index = result._buffer, result._row_index

    # --- Value-returning arithmetic ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Any) -> Matrix:
        if not (isinstance(other, Matrix) or _is_scalar(other)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result @= other
        return result

    def __truediv__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __neg__(self) -> Matrix:
        return Matrix.from_array(-self.to_array(), self.dtype)


def integral_result(value: int, dtype: np.dtype) -> Any:
    """Convert an exact Python int to dtype, refusing to wrap around."""
    info = np.iinfo(dtype)
    if not info.min <= value <= info.max:
        raise OverflowError(f"determinant {value} does not fit in {dtype}")
    return dtype.type(value)


def signed_diagonal_product(pivots: NDArray[Any], swaps: int) -> Any:
    """Product of pivots, negated for an odd number of row swaps."""
    value = np.prod(pivots, dtype=pivots.dtype)
    return -value if swaps % 2 else value


def transpose(matrix: Matrix) -> Matrix:
    """Transposed copy; the argument is left untouched."""
    result = matrix.copy()
    result.transpose()
    return result
