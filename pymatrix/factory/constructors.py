"""
Matrix construction helpers.

Every helper validates the requested shape before building anything and
returns a fresh list of row lists; no two rows share a list object.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from pymatrix.core.exceptions import InvalidRangeError, ValidationError
from pymatrix.core.validation import (
    Matrix,
    check_count,
    check_range,
    check_shape,
)


# Placeholder stored in every cell of create_empty(). It carries no
# numeric meaning; arithmetic on an empty matrix is rejected by the
# numeric-cell validator.
EMPTY = None


def create_empty(rows: int, cols: int) -> Matrix:
    """
    Create a rows x cols matrix of placeholder cells.

    Parameters
    ----------
    rows : int
        Number of rows, at least 1.
    cols : int
        Number of columns, at least 1.

    Returns
    -------
    list of lists where every cell is EMPTY (None).
    """
    return create_constant(rows, cols, EMPTY)


def create_constant(rows: int, cols: int, value: Any) -> Matrix:
    """
    Create a rows x cols matrix with every cell set to value.

    value is stored as-is and need not be numeric.
    """
    check_shape(rows, cols)
    return [[value] * cols for _ in range(rows)]


def create_random(
    rows: int,
    cols: int,
    low: float,
    high: float,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> Matrix:
    """
    Create a rows x cols matrix of independent uniform draws from [low, high).

    Parameters
    ----------
    rows, cols : int
        Matrix shape, each at least 1.
    low : int or float
        Inclusive lower bound.
    high : int or float
        Exclusive upper bound, strictly greater than low.
    seed : int, optional
        Seed for a fresh numpy Generator. Mutually exclusive with rng.
    rng : numpy.random.Generator, optional
        Generator to draw from. Its state advances.

    Returns
    -------
    list of lists. Cells are Python ints when both bounds are integers,
    floats otherwise.

    Raises
    ------
    InvalidShapeError
        If rows or cols is below 1.
    InvalidRangeError
        If low >= high, a bound is not finite, or the span is outside
        what the generator can draw from.
    ValidationError
        If both seed and rng are given.
    """
    check_shape(rows, cols)
    check_range(low, high)

    if seed is not None and rng is not None:
        raise ValidationError("pass either seed or rng, not both")
    if rng is None:
        rng = np.random.default_rng(seed)

    # numpy rejects integer bounds outside int64 and float spans that
    # overflow high - low
    try:
        if isinstance(low, numbers.Integral) and isinstance(high, numbers.Integral):
            draws = rng.integers(low, high, size=(rows, cols))
        else:
            draws = rng.uniform(low, high, size=(rows, cols))
    except (ValueError, OverflowError) as e:
        raise InvalidRangeError(
            f"range [{low}, {high}) is not supported by the random generator: {e}",
            low=low,
            high=high,
        ) from e
    return draws.tolist()


def create_identity(dim: int) -> Matrix:
    """Create a dim x dim identity matrix of integer 0/1 cells."""
    check_count(dim, "dim")
    check_shape(dim, dim)
    return [[1 if i == j else 0 for j in range(dim)] for i in range(dim)]
