"""
Hadamard (element-wise) product.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.core.validation import Matrix, check_matrix
from pymatrix.products._common import check_same_shape


def hadamard(a: ArrayLike, b: ArrayLike) -> Matrix:
    """
    Multiply two equal-shaped matrices cell by cell.

    Parameters
    ----------
    a : array-like
        Multiplicand matrix [GxH].
    b : array-like
        Multiplier matrix [GxH].

    Returns
    -------
    New [GxH] matrix with cell [i][j] = a[i][j] * b[i][j]. Integer
    inputs give integer cells.

    Raises
    ------
    DimensionMismatchError
        If the row counts differ (dimension='rows'), or otherwise if the
        column counts differ (dimension='cols').
    """
    a_rows = check_matrix(a, "a")
    b_rows = check_matrix(b, "b")
    check_same_shape(a_rows, b_rows)

    return [
        [x * y for x, y in zip(a_row, b_row)]
        for a_row, b_row in zip(a_rows, b_rows)
    ]
