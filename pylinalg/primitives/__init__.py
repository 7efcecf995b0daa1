"""
Dense numeric primitives.

Public API:
    Matrix          - fixed-size 2-D container with tolerance-aware comparison
    Vector          - row or column vector (Matrix with one unit extent)
    LinearEquation  - hyperplane n . x = k
    Line, Plane     - 2-D and 3-D convenience equations

Every container carries the tolerance it was built with and passes it on
to every container derived from it.
"""

from pylinalg.primitives.matrix import Matrix
from pylinalg.primitives.vector import Vector
from pylinalg.primitives.equation import LinearEquation, Line, Plane

__all__ = [
    "Matrix",
    "Vector",
    "LinearEquation",
    "Line",
    "Plane",
]
