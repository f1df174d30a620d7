"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from linmath import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a43():
    """4x3 matrix filled row-major with 1..12."""
    return Matrix.from_iterable(4, 3, range(1, 13))


@pytest.fixture
def well_conditioned(rng):
    """Random 6x6 float64 matrix, diagonally dominant so it is far from singular."""
    values = rng.standard_normal((6, 6)) + 6.0 * np.eye(6)
    return Matrix.from_array(values)


@pytest.fixture
def random_pair(rng):
    """Two random 4x5 float64 matrices for algebraic identities."""
    return (
        Matrix.from_array(rng.standard_normal((4, 5))),
        Matrix.from_array(rng.standard_normal((4, 5))),
    )
