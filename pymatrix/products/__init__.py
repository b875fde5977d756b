"""
Matrix and vector products.

Public API:
    kronecker(a, b)                 - Kronecker (tensor) product
    hadamard(a, b)                  - Element-wise product
    scalar_multiply(s, m)           - Scalar times matrix or vector
    scalar_vector_multiply(s, v)    - Scalar times vector
    scalar_matrix_multiply(s, m)    - Scalar times matrix
    matrix_multiply(m1, m2)         - General product (float results)
    vector_vector_multiply(v1, v2)  - Inner or outer product
    vector_matrix_multiply(v, m)    - Row vector times matrix
    matrix_vector_multiply(m, v)    - Matrix times column vector
"""

from pymatrix.products.elementwise import hadamard
from pymatrix.products.tensor import kronecker
from pymatrix.products.scalar import (
    scalar_multiply,
    scalar_vector_multiply,
    scalar_matrix_multiply,
)
from pymatrix.products.linear import (
    matrix_multiply,
    matrix_matrix_multiply,
    vector_vector_multiply,
    vector_matrix_multiply,
    matrix_vector_multiply,
)

__all__ = [
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
