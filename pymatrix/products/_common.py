"""
Shared dimension-compatibility checks for the product family.
"""

from __future__ import annotations

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import Matrix, shape_of


def check_same_shape(a: Matrix, b: Matrix) -> tuple[int, int]:
    """
    Verify two matrices have identical shape, rows first.

    Returns:
        The common (rows, cols)

    Raises:
        DimensionMismatchError: With dimension='rows' or 'cols'
    """
    a_rows, a_cols = shape_of(a)
    b_rows, b_cols = shape_of(b)
    if a_rows != b_rows:
        raise DimensionMismatchError(
            f"matrices do not have equal dimensionality (rows): "
            f"a has {a_rows}, b has {b_rows}",
            dimension='rows',
            left=a_rows,
            right=b_rows,
        )
    if a_cols != b_cols:
        raise DimensionMismatchError(
            f"matrices do not have equal dimensionality (columns): "
            f"a has {a_cols}, b has {b_cols}",
            dimension='cols',
            left=a_cols,
            right=b_cols,
        )
    return a_rows, a_cols


def check_inner_dimension(m1: Matrix, m2: Matrix) -> tuple[int, int, int]:
    """
    Verify cols(m1) == rows(m2) for the product m1 * m2.

    Returns:
        (rows of m1, shared inner size, cols of m2)

    Raises:
        DimensionMismatchError: With dimension='inner', left=cols(m1),
            right=rows(m2)
    """
    m1_rows, m1_cols = shape_of(m1)
    m2_rows, m2_cols = shape_of(m2)
    if m1_cols != m2_rows:
        raise DimensionMismatchError(
            f"inner dimensions do not match: m1 cols = {m1_cols}, "
            f"m2 rows = {m2_rows}. The column count of m1 must equal "
            f"the row count of m2.",
            dimension='inner',
            left=m1_cols,
            right=m2_rows,
        )
    return m1_rows, m1_cols, m2_cols
