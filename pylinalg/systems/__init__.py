"""
Systems of linear equations.

Public API:
    solve(equations, ...) -> SystemSolution

The solve() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinalg.primitives import Plane
    >>> from pylinalg.systems import solve
    >>> result = solve([Plane(1, 1, 1, 1), Plane(2, 2, 2, 2)])
    >>> print(result.parametrization)
    v1 = 1 - t1 - t2
    v2 = t1
    v3 = t2
"""

from pylinalg.systems.design import SystemDesign
from pylinalg.systems.solution import (
    SolutionKind,
    Parametrization,
    SystemParams,
    SystemSolution,
)
from pylinalg.systems.solvers import solve

__all__ = [
    "solve",
    "SystemDesign",
    "SolutionKind",
    "Parametrization",
    "SystemParams",
    "SystemSolution",
]
