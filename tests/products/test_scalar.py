"""
Tests for scalar-by-vector and scalar-by-matrix multiplication.
"""

import numpy as np
import pytest

from pymatrix import (
    hadamard,
    scalar_matrix_multiply,
    scalar_multiply,
    scalar_vector_multiply,
)
from pymatrix.core.exceptions import DimensionError, ValidationError


def _cellwise_sum(a, b):
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


class TestScalarVector:

    def test_row_vector(self):
        assert scalar_vector_multiply(5, [[1, 2, 3]]) == [[5, 10, 15]]

    def test_column_vector(self):
        assert scalar_vector_multiply(5, [[1], [2], [3]]) == [[5], [10], [15]]

    def test_matrix_rejected(self):
        with pytest.raises(DimensionError, match="expected a vector"):
            scalar_vector_multiply(5, [[1, 2], [3, 4]])


class TestScalarMatrix:

    def test_package_example(self):
        assert scalar_matrix_multiply(5, [[1, 2, 3], [4, 5, 6]]) == [
            [5, 10, 15],
            [20, 25, 30],
        ]

    def test_no_float_promotion(self):
        result = scalar_multiply(2, [[1, 2], [3, 4]])
        assert all(type(cell) is int for row in result for cell in row)

    def test_float_scalar(self):
        assert scalar_multiply(0.5, [[2, 4]]) == [[1.0, 2.0]]

    def test_zero_scalar(self):
        assert scalar_multiply(0, [[1, -2], [3, 4]]) == [[0, 0], [0, 0]]

    def test_matches_numpy(self, rng):
        m = rng.standard_normal((3, 4))
        np.testing.assert_array_equal(np.array(scalar_multiply(-1.75, m)), -1.75 * m)

    def test_linear_in_scalar(self, rng):
        m = rng.integers(-10, 11, size=(3, 3)).tolist()
        lhs = scalar_multiply(3 + 4, m)
        rhs = _cellwise_sum(scalar_multiply(3, m), scalar_multiply(4, m))
        assert lhs == rhs

    def test_agrees_with_hadamard_of_constant(self, rng):
        m = rng.integers(-10, 11, size=(2, 3)).tolist()
        assert scalar_multiply(3, m) == hadamard([[3] * 3] * 2, m)

    @pytest.mark.parametrize("s", [True, "2", None, [[2]]])
    def test_non_numeric_scalar_rejected(self, s):
        with pytest.raises(ValidationError, match="s: expected a number"):
            scalar_multiply(s, [[1, 2]])

    def test_nested_cells_rejected(self):
        with pytest.raises(DimensionError, match="3D"):
            scalar_multiply(2, [[[1, 2]]])

    def test_nested_vector_cells_rejected(self):
        with pytest.raises(DimensionError, match="3D"):
            scalar_vector_multiply(2, [[[1], [2]]])

    def test_big_integer_matrix(self):
        assert scalar_multiply(3, [[2**70]]) == [[3 * 2**70]]

    def test_input_not_mutated(self):
        m = [[1, 2], [3, 4]]
        scalar_multiply(10, m)
        assert m == [[1, 2], [3, 4]]
