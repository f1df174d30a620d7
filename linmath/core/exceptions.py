"""
Exception hierarchy for linmath.

All exceptions inherit from LinmathError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Operations validate before mutating, so a raised error leaves
      every operand exactly as it was
"""


class LinmathError(Exception):
    """Base exception for all linmath errors."""
    pass


class ValidationError(LinmathError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: unsupported
    element dtypes, negative sizes, unknown method names, operands whose
    dtypes disagree.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised by element-wise arithmetic on matrices of different shape, by
    matrix products whose inner dimensions disagree, and by determinant
    on a non-square matrix.

    Attributes:
        expected: Shape (or length) the operation required, if known
        actual: Shape (or length) it was given, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


# Name used throughout the design notes for the shape-mismatch kind.
ShapeMismatch = DimensionError


class NumericalError(LinmathError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Never raised by the elimination kernel itself; a singular floating-point
    matrix yields a non-finite determinant. Raised only when the caller
    asks for it (``det(..., check_finite=True)``).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        value: The non-finite determinant that was produced, if any
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.value = value


class UnsupportedOperationError(LinmathError):
    """
    Operation is not available for the matrix element type.

    Gauss-Jordan elimination divides by pivots, which is not closed over
    integral dtypes; requesting it (directly or through
    ``determinant(method='gauss_jordan')``) on an integer matrix raises
    this instead of returning a truncated answer.

    Attributes:
        operation: Name of the rejected operation
        dtype: String form of the element dtype
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        dtype: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.dtype = dtype
