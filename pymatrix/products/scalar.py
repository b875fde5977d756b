"""
Scalar-by-vector and scalar-by-matrix multiplication.

A vector is a matrix with one row or one column, so both operations
share one code path; the vector form only adds an orientation check.
"""

from __future__ import annotations

from numbers import Number

from numpy.typing import ArrayLike

from pymatrix.core.validation import (
    Matrix,
    check_matrix,
    check_scalar,
    check_vector,
)


def _scale(s: Number, rows: Matrix) -> Matrix:
    return [[s * cell for cell in row] for row in rows]


def scalar_multiply(s: Number, m: ArrayLike) -> Matrix:
    """
    Multiply every cell of m by the scalar s.

    No float promotion: 5 * [[1, 2]] is [[5, 10]].

    Raises
    ------
    ValidationError
        If s is not a number or m has non-numeric cells.
    """
    check_scalar(s, "s")
    return _scale(s, check_matrix(m, "m"))


def scalar_vector_multiply(s: Number, v: ArrayLike) -> Matrix:
    """
    Multiply a row vector [1xH] or column vector [Gx1] by s.

    Raises
    ------
    DimensionError
        If v has more than one row and more than one column.
    """
    check_scalar(s, "s")
    rows = check_matrix(v, "v")
    check_vector(rows, "v")
    return _scale(s, rows)


def scalar_matrix_multiply(s: Number, m: ArrayLike) -> Matrix:
    """Multiply a [GxH] matrix by s. Same as scalar_multiply."""
    return scalar_multiply(s, m)
