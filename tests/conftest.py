"""
pytest configuration and shared fixtures.
"""

from dataclasses import dataclass

import pytest
import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str


# A few double-precision products per cell
FP64 = ToleranceTier(rtol=1e-12, atol=1e-14, name='fp64')

# Long running sums, where rounding error grows with the number of terms
FP64_ACCUMULATED = ToleranceTier(rtol=1e-9, atol=1e-11, name='fp64_accumulated')

# Above this many terms per cell the ordered running sum may drift from
# numpy's pairwise/BLAS summation by more than FP64 allows.
ACCUMULATION_THRESHOLD = 64


def select_tolerance(n_terms: int) -> ToleranceTier:
    """Select the tolerance tier for a cell built from n_terms products."""
    if n_terms > ACCUMULATION_THRESHOLD:
        return FP64_ACCUMULATED
    return FP64


@pytest.fixture
def tolerance_for():
    """Tolerance tier selector for comparing products against numpy."""
    return select_tolerance


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_pair():
    """The 2x2 integer operands used throughout the package examples."""
    a = [[1, 2], [2, -1]]
    b = [[1, 2], [3, 4]]
    return a, b


@pytest.fixture
def random_chain(rng):
    """Three float matrices with compatible shapes for chained products."""
    m1 = rng.standard_normal((4, 3)).tolist()
    m2 = rng.standard_normal((3, 5)).tolist()
    m3 = rng.standard_normal((5, 2)).tolist()
    return m1, m2, m3
