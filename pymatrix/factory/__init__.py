"""
Matrix construction helpers.

Public API:
    create_empty(rows, cols)              - Placeholder-filled matrix
    create_constant(rows, cols, value)    - Every cell equal to value
    create_random(rows, cols, low, high)  - Uniform draws from [low, high)
    create_identity(dim)                  - Square identity matrix
"""

from pymatrix.factory.constructors import (
    EMPTY,
    create_empty,
    create_constant,
    create_random,
    create_identity,
)

__all__ = [
    "EMPTY",
    "create_empty",
    "create_constant",
    "create_random",
    "create_identity",
]
