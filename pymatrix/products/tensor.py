"""
Kronecker (tensor) product.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.core.validation import Matrix, check_matrix


def kronecker(a: ArrayLike, b: ArrayLike) -> Matrix:
    """
    Kronecker product of a [GxH] and b [JxK].

    The result is [(G*J)x(H*K)]. Result row (g*J + j) is the concatenation,
    over each cell a[g][h], of a[g][h] * b[j]. Any two non-empty
    rectangular matrices are valid operands.

    Examples
    --------
    >>> kronecker([[1, 2], [2, -1]], [[1, 2], [3, 4]])
    [[1, 2, 2, 4], [3, 4, 6, 8], [2, 4, -1, -2], [6, 8, -3, -4]]
    """
    a_rows = check_matrix(a, "a")
    b_rows = check_matrix(b, "b")

    result = []
    for a_row in a_rows:
        for b_row in b_rows:
            row = []
            for a_cell in a_row:
                row.extend(a_cell * b_cell for b_cell in b_row)
            result.append(row)
    return result
