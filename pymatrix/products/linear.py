"""
General matrix multiplication and its vector forms.

Every product here goes through one routine, _multiply(). Vector
arguments are ordinary 1xN or Nx1 matrices; the vector entry points only
add an orientation check before delegating.

Each result cell is a running sum seeded with 0.0 and accumulated in
index order, so results are always floats, even for integer operands:

    >>> matrix_multiply([[1, 2, 3]], [[1], [2], [3]])
    [[14.0]]

A 1x1 product stays a 1x1 matrix; it is never unwrapped to a scalar.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.core.validation import (
    Matrix,
    check_column_vector,
    check_matrix,
    check_row_vector,
    check_vector,
)
from pymatrix.products._common import check_inner_dimension


def _multiply(m1: Matrix, m2: Matrix) -> Matrix:
    """Multiply two validated matrices. Accumulators are local to the call."""
    n_rows, n_inner, n_cols = check_inner_dimension(m1, m2)

    result = []
    for i in range(n_rows):
        m1_row = m1[i]
        row = []
        for j in range(n_cols):
            total = 0.0
            for k in range(n_inner):
                total += m1_row[k] * m2[k][j]
            row.append(total)
        result.append(row)
    return result


def matrix_multiply(m1: ArrayLike, m2: ArrayLike) -> Matrix:
    """
    Multiply m1 [GxH] by m2 [HxJ].

    Parameters
    ----------
    m1 : array-like
        Multiplicand matrix [GxH].
    m2 : array-like
        Multiplier matrix [HxJ].

    Returns
    -------
    New [GxJ] matrix of floats, cell [i][j] = sum_k m1[i][k] * m2[k][j].

    Raises
    ------
    DimensionMismatchError
        If cols(m1) != rows(m2). The error's left/right attributes hold
        those two counts.
    """
    return _multiply(check_matrix(m1, "m1"), check_matrix(m2, "m2"))


def matrix_matrix_multiply(m1: ArrayLike, m2: ArrayLike) -> Matrix:
    """Alias of matrix_multiply."""
    return matrix_multiply(m1, m2)


def vector_vector_multiply(v1: ArrayLike, v2: ArrayLike) -> Matrix:
    """
    Multiply two vectors.

    [1xJ] * [Jx1] gives the 1x1 inner product [[dot]]; [Kx1] * [1xK]
    gives the KxK outer product.

    Raises
    ------
    DimensionError
        If either argument is not a vector.
    DimensionMismatchError
        If the orientations do not line up.
    """
    rows1 = check_matrix(v1, "v1")
    rows2 = check_matrix(v2, "v2")
    check_vector(rows1, "v1")
    check_vector(rows2, "v2")
    return _multiply(rows1, rows2)


def vector_matrix_multiply(v: ArrayLike, m: ArrayLike) -> Matrix:
    """
    Multiply a row vector v [1xJ] by m [JxK], giving a [1xK] row vector.

    Raises
    ------
    DimensionError
        If v is not a row vector.
    DimensionMismatchError
        If cols(v) != rows(m).
    """
    v_rows = check_matrix(v, "v")
    m_rows = check_matrix(m, "m")
    check_row_vector(v_rows, "v")
    return _multiply(v_rows, m_rows)


def matrix_vector_multiply(m: ArrayLike, v: ArrayLike) -> Matrix:
    """
    Multiply m [JxK] by a column vector v [Kx1], giving a [Jx1] column vector.

    Raises
    ------
    DimensionError
        If v is not a column vector.
    DimensionMismatchError
        If cols(m) != rows(v).
    """
    m_rows = check_matrix(m, "m")
    v_rows = check_matrix(v, "v")
    check_column_vector(v_rows, "v")
    return _multiply(m_rows, v_rows)
