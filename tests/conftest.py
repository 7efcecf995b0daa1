"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.primitives import Line, Plane, LinearEquation


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def unique_lines():
    """x + y = 3, x - y = 1 -> (2, 1)."""
    return [Line(1, 1, 3), Line(1, -1, 1)]


@pytest.fixture
def coincident_planes():
    """x + y + z = 1 and twice that: a plane of solutions."""
    return [Plane(1, 1, 1, 1), Plane(2, 2, 2, 2)]


@pytest.fixture
def parallel_lines():
    """x + y = 1, x + y = 5: no solution."""
    return [Line(1, 1, 1), Line(1, 1, 5)]


@pytest.fixture
def zero_row_system():
    """x = 0 together with 0 = 1 (zero normal vector)."""
    return [
        LinearEquation.from_coefficients([1.0], 0.0),
        LinearEquation.from_coefficients([0.0], 1.0),
    ]
