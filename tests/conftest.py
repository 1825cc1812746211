"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyechelon import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_3x3():
    """Well-conditioned 3x3 with det = -174."""
    return Matrix.from_rows([[8, 5, -2], [4, 7, 20], [7, 6, 1]])


@pytest.fixture
def singular_3x3():
    """Classic singular matrix: rows in arithmetic progression."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def rank_deficient_3x4():
    """3x4 with a duplicated (scaled) row; rank 2."""
    return Matrix.from_rows([[1, 2, 0, 0], [2, 4, 0, 0], [-1, 2, 1, 1]])


@pytest.fixture
def random_square_matrices(rng):
    """Random dense square matrices of sizes 1..5 (almost surely invertible)."""
    return [
        Matrix.from_array(rng.standard_normal((n, n)))
        for n in range(1, 6)
        for _ in range(3)
    ]


@pytest.fixture
def random_rectangular_matrices(rng):
    """Random matrices of mixed shapes, some with forced rank deficiency."""
    mats = []
    for rows, cols in [(2, 3), (3, 2), (4, 4), (3, 5), (5, 3)]:
        A = rng.standard_normal((rows, cols))
        mats.append(Matrix.from_array(A))
        # Copy the first row into the last: rank drops unless rows == 1
        B = A.copy()
        B[-1] = 2.0 * B[0]
        mats.append(Matrix.from_array(B))
    return mats
