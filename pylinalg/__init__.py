"""
PyLinalg: dense linear algebra and linear-system solving for Python.

Submodules:
    primitives: Matrix, Vector, LinearEquation, Line, Plane
    systems: Gauss-Jordan solver with solution-set classification and
             parametrization of under-determined systems
"""

__version__ = "0.1.0"

from pylinalg import primitives
from pylinalg import systems
from pylinalg.primitives import Matrix, Vector, LinearEquation, Line, Plane
from pylinalg.systems import solve, SolutionKind

__all__ = [
    "__version__",
    "primitives",
    "systems",
    "Matrix",
    "Vector",
    "LinearEquation",
    "Line",
    "Plane",
    "solve",
    "SolutionKind",
]
