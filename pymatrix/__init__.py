"""
pymatrix: reference-correct dense matrix utilities for Python.

Plain nested-list matrices in, freshly built nested-list matrices out.
Every operation is a pure function with call-local state.

Submodules:
    factory: Empty, constant, random and identity matrices
    products: Kronecker, Hadamard, scalar and linear products
    core: Exceptions and validators
"""

__version__ = "1.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    InvalidShapeError,
    InvalidRangeError,
)
from pymatrix.factory import (
    EMPTY,
    create_empty,
    create_constant,
    create_random,
    create_identity,
)
from pymatrix.products import (
    hadamard,
    kronecker,
    scalar_multiply,
    scalar_vector_multiply,
    scalar_matrix_multiply,
    matrix_multiply,
    matrix_matrix_multiply,
    vector_vector_multiply,
    vector_matrix_multiply,
    matrix_vector_multiply,
)

__all__ = [
    "__version__",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "InvalidShapeError",
    "InvalidRangeError",
    # Construction
    "EMPTY",
    "create_empty",
    "create_constant",
    "create_random",
    "create_identity",
    # Products
    "hadamard",
    "kronecker",
    "scalar_multiply",
    "scalar_vector_multiply",
    "scalar_matrix_multiply",
    "matrix_multiply",
    "matrix_matrix_multiply",
    "vector_vector_multiply",
    "vector_matrix_multiply",
    "matrix_vector_multiply",
]
