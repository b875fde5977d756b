"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
factory and products submodules.

Key components:
    exceptions: Exception hierarchy
    validation: Operand, shape and range validators
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    InvalidShapeError,
    InvalidRangeError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "InvalidShapeError",
    "InvalidRangeError",
]
