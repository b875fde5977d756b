"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every failure is raised to the immediate caller
before any part of a result matrix is handed back.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric cells, non-integer shape arguments, conflicting options).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when an operand is not a rectangular 2D matrix, or when a
    vector argument has the wrong orientation.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised by the Hadamard product when row or column counts differ, and
    by matrix multiplication when the inner dimensions disagree.

    Attributes:
        dimension: Which dimension disagreed ('rows', 'cols' or 'inner')
        left: The conflicting size taken from the left operand
        right: The conflicting size taken from the right operand
    """

    def __init__(
        self,
        message: str,
        dimension: str,
        left: int,
        right: int,
    ):
        super().__init__(message)
        self.dimension = dimension
        self.left = left
        self.right = right


class InvalidShapeError(DimensionError):
    """
    Requested or supplied matrix shape is not positive.

    Raised by construction helpers when a row, column or dimension count
    is below 1, and by operations handed a matrix with no rows or no
    columns.

    Attributes:
        rows: Offending row count, if known
        cols: Offending column count, if known
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class InvalidRangeError(ValidationError):
    """
    Random-value bounds are empty.

    Raised when the lower bound of a uniform draw is not strictly below
    the upper bound.

    Attributes:
        low: Requested lower bound (inclusive)
        high: Requested upper bound (exclusive)
    """

    def __init__(self, message: str, low: float, high: float):
        super().__init__(message)
        self.low = low
        self.high = high
