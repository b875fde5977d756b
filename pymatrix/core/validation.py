"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (numpy arrays are converted with tolist())
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidRangeError,
    InvalidShapeError,
    ValidationError,
)


Matrix = list[list[Any]]


def check_matrix(matrix: Any, name: str) -> Matrix:
    """
    Validate a matrix operand and return it as fresh nested lists.

    Accepts nested sequences or a 2D numpy array. Nested-sequence cells are
    kept as-is so Python ints stay ints; arrays go through tolist().

    Args:
        matrix: Input to validate
        name: Parameter name for error messages

    Returns:
        New list of row lists (never aliases the caller's rows)

    Raises:
        DimensionError: If input is not a rectangular 2D matrix
        InvalidShapeError: If input has no rows or no columns
        ValidationError: If any cell is non-numeric
    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise DimensionError(
                f"{name}: expected 2D array, got {matrix.ndim}D with shape {matrix.shape}"
            )
        rows = matrix.tolist()
    else:
        try:
            rows = [list(row) for row in matrix]
        except TypeError as e:
            raise DimensionError(f"{name}: expected a sequence of rows: {e}") from e

    check_not_empty(rows, name)
    check_rectangular(rows, name)
    check_numeric(rows, name)
    return rows


def check_not_empty(rows: Matrix, name: str) -> None:
    """
    Verify a matrix has at least one row and one column.

    Raises:
        InvalidShapeError: If there are no rows, or the first row is empty
    """
    if len(rows) == 0:
        raise InvalidShapeError(f"{name}: matrix has no rows", rows=0)
    if len(rows[0]) == 0:
        raise InvalidShapeError(
            f"{name}: matrix has no columns", rows=len(rows), cols=0
        )


def check_rectangular(rows: Matrix, name: str) -> None:
    """
    Verify every row has the same length as the first.

    Raises:
        DimensionError: On the first ragged row, reporting both lengths
    """
    n_cols = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != n_cols:
            raise DimensionError(
                f"{name}: ragged matrix, row {index} has {len(row)} cells, "
                f"expected {n_cols}"
            )


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


def check_numeric(rows: Matrix, name: str) -> None:
    """
    Verify every cell is a real or complex number.

    Uses numpy's dtype inference: non-numeric cells produce an object,
    string or bool dtype. An object dtype is still accepted when every cell
    is a number, which covers Python ints outside the int64 range.

    Raises:
        DimensionError: If cells are themselves sequences
        ValidationError: If any cell is non-numeric
    """
    try:
        array = np.asarray(rows)
    except ValueError as e:
        raise DimensionError(f"{name}: cells must be numbers, not sequences: {e}") from e

    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D matrix, got {array.ndim}D with shape {array.shape}"
        )

    dtype = array.dtype
    if dtype == object:
        if all(_is_number(cell) for row in rows for cell in row):
            return
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if not np.issubdtype(dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {dtype}, expected numeric data"
        )


def shape_of(rows: Matrix) -> tuple[int, int]:
    """Return (rows, cols) of a matrix already passed through check_matrix."""
    return len(rows), len(rows[0])


def check_vector(rows: Matrix, name: str) -> None:
    """
    Verify a matrix is a row vector [1xN] or a column vector [Nx1].

    Raises:
        DimensionError: If the matrix has more than one row and column
    """
    n_rows, n_cols = shape_of(rows)
    if n_rows != 1 and n_cols != 1:
        raise DimensionError(
            f"{name}: expected a vector (1xN or Nx1), got {n_rows}x{n_cols}"
        )


def check_row_vector(rows: Matrix, name: str) -> None:
    """
    Verify a matrix is a row vector [1xN].

    Raises:
        DimensionError: If the matrix has more than one row
    """
    n_rows, n_cols = shape_of(rows)
    if n_rows != 1:
        raise DimensionError(
            f"{name}: expected a row vector (1xN), got {n_rows}x{n_cols}"
        )


def check_column_vector(rows: Matrix, name: str) -> None:
    """
    Verify a matrix is a column vector [Nx1].

    Raises:
        DimensionError: If the matrix has more than one column
    """
    n_rows, n_cols = shape_of(rows)
    if n_cols != 1:
        raise DimensionError(
            f"{name}: expected a column vector (Nx1), got {n_rows}x{n_cols}"
        )


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a value is a single number.

    numpy scalars are accepted; bool is rejected even though it subclasses
    int.

    Raises:
        ValidationError: If value is not a number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__}"
        )


def check_count(value: Any, name: str) -> None:
    """
    Verify a shape argument is an integer.

    Raises:
        ValidationError: If value is not an integer (bool is rejected)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )


def check_shape(rows: Any, cols: Any) -> None:
    """
    Verify a requested matrix shape is a pair of positive integers.

    Raises:
        ValidationError: If either count is not an integer
        InvalidShapeError: If either count is below 1
    """
    check_count(rows, "rows")
    check_count(cols, "cols")
    if rows < 1 or cols < 1:
        raise InvalidShapeError(
            f"shape must be at least 1x1, got {rows}x{cols}",
            rows=int(rows),
            cols=int(cols),
        )


def check_range(low: Any, high: Any) -> None:
    """
    Verify [low, high) is a non-empty real interval.

    Raises:
        ValidationError: If either bound is not a real number
        InvalidRangeError: If a bound is NaN or infinite, or low >= high
    """
    for value, name in ((low, "low"), (high, "high")):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise ValidationError(
                f"{name}: expected a real number, got {type(value).__name__}"
            )
        # Integers are always finite, and may be too large for np.isfinite
        if not isinstance(value, numbers.Integral) and not np.isfinite(value):
            raise InvalidRangeError(
                f"{name}: bound must be finite, got {value}",
                low=low,
                high=high,
            )
    if low >= high:
        raise InvalidRangeError(
            f"empty range: low ({low}) must be strictly less than high ({high})",
            low=low,
            high=high,
        )
