"""
Tests for pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Diagnostic attributes on DimensionMismatchError, InvalidShapeError,
      InvalidRangeError
    - str works correctly
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidRangeError,
    InvalidShapeError,
    PyMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DimensionMismatchError("mismatch", dimension='rows', left=2, right=3)

    def test_invalid_shape_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise InvalidShapeError("0x3", rows=0, cols=3)

    def test_invalid_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidRangeError("empty", low=1.0, high=1.0)

    def test_invalid_range_is_not_dimension_error(self):
        err = InvalidRangeError("empty", low=2, high=1)
        assert not isinstance(err, DimensionError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatchError:
    """DimensionMismatchError carries both conflicting sizes."""

    def test_all_attributes(self):
        err = DimensionMismatchError(
            "m1 cols = 3, m2 rows = 2",
            dimension='inner',
            left=3,
            right=2,
        )
        assert str(err) == "m1 cols = 3, m2 rows = 2"
        assert err.dimension == 'inner'
        assert err.left == 3
        assert err.right == 2

    def test_catchable_with_attributes(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            raise DimensionMismatchError("cols", dimension='cols', left=4, right=5)
        assert exc_info.value.dimension == 'cols'
        assert exc_info.value.left == 4
        assert exc_info.value.right == 5


class TestInvalidShapeError:

    def test_defaults_are_none(self):
        err = InvalidShapeError("no rows")
        assert err.rows is None
        assert err.cols is None

    def test_partial_attributes(self):
        err = InvalidShapeError("no columns", rows=2, cols=0)
        assert err.rows == 2
        assert err.cols == 0


class TestInvalidRangeError:

    def test_all_attributes(self):
        err = InvalidRangeError("low >= high", low=2.0, high=-2.0)
        assert str(err) == "low >= high"
        assert err.low == 2.0
        assert err.high == -2.0
