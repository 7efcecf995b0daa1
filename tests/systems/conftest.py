"""
Shared fixtures for linear system tests.

Random systems are built with a known rank so classification and
parametrization can be checked against independent references.
"""

import numpy as np
import pytest


def _rank_deficient(rng, m, d, rank):
    left = rng.standard_normal((m, rank))
    right = rng.standard_normal((rank, d))
    return left @ right


@pytest.fixture
def random_square(rng):
    """Well-conditioned 4 x 4 system with known solution."""
    A = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
    x = rng.standard_normal(4)
    return A, A @ x, x


@pytest.fixture
def random_underdetermined(rng):
    """Consistent 4 x 5 system of rank 3 (two free variables)."""
    A = _rank_deficient(rng, 4, 5, 3)
    x = rng.standard_normal(5)
    return A, A @ x


@pytest.fixture
def random_inconsistent(rng):
    """Rank-2 3 x 3 system whose offsets leave the column space."""
    A = _rank_deficient(rng, 3, 3, 2)
    b = A @ rng.standard_normal(3)
    # Component orthogonal to the column space makes it inconsistent
    u, _, _ = np.linalg.svd(A)
    return A, b + u[:, 2]
