"""
Exception hierarchy for PyEchelon.

All exceptions inherit from PyEchelonError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyEchelonError(Exception):
    """Base exception for all PyEchelon errors."""
    pass


class ValidationError(PyEchelonError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: jagged rows,
    entries the field cannot represent, non-finite array data.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible.

    Raised when a matrix or vector does not have the shape an operation
    requires (e.g. inner dimensions of a product do not match).

    Attributes:
        expected: Expected shape or size, if known
        actual: Actual shape or size, if known
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


class NotSquareError(DimensionError):
    """
    A square-only operation received a non-square matrix.

    Attributes:
        shape: The (rows, cols) shape that was rejected
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message, actual=shape)
        self.shape = shape


class InvalidReshapeError(DimensionError):
    """
    Reshape requested a shape whose element count differs from the source.

    Attributes:
        size: Number of elements in the source container
        requested: The (rows, cols) shape that was requested
    """

    def __init__(
        self,
        message: str,
        size: int | None = None,
        requested: tuple[int, int] | None = None,
    ):
        super().__init__(message, expected=size, actual=requested)
        self.size = size
        self.requested = requested


class NumericalError(PyEchelonError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires invertibility but elimination finds
    no usable pivot in some column.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column in which no pivot above tolerance was found
        rank: Number of pivots fixed before the failure
        expected_rank: Rank required for success (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column
        self.rank = rank
        self.expected_rank = expected_rank
