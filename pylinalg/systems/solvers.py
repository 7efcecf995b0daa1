"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from __future__ import annotations

from typing import Any, Literal, Sequence
import warnings

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Backend
from pylinalg.primitives.equation import LinearEquation
from pylinalg.systems.design import SystemDesign
from pylinalg.systems.solution import SystemParams, SystemSolution
from pylinalg.systems.backends.cpu import CPUGaussJordanBackend


BackendChoice = Literal['auto', 'cpu']


def solve(
    equations: Sequence[LinearEquation] | SystemDesign,
    *,
    tolerance: Any = None,
    backend: BackendChoice = 'auto',
) -> SystemSolution:
    """
    Solve a system of linear equations.

    Reduces the system to reduced row-echelon form and classifies its
    solution set as inconsistent, unique or infinite. Infinite solution
    sets come with a parametrization (base point plus one direction
    vector per free variable).

    Args:
        equations: Sequence of LinearEquation sharing one dimension, or a
            prepared SystemDesign.
        tolerance: Absolute tolerance for every zero test. None keeps the
            tolerance carried by the input; a float, ToleranceTier or tier
            name ('default', 'strict', 'relaxed') overrides it.
        backend: 'auto' or 'cpu' (Gauss-Jordan on NumPy arrays).

    Returns:
        SystemSolution with the classification, RREF and payload

    Raises:
        DegenerateInputError: If the system has no equations
        DimensionError: If the equations have different dimensions
        ValidationError: If inputs or options are invalid
        InvariantViolationError: If elimination breaks an internal invariant

    Example:
        >>> from pylinalg.primitives import Line
        >>> from pylinalg.systems import solve
        >>> result = solve([Line(1, 1, 3), Line(1, -1, 1)])
        >>> result.kind
        <SolutionKind.UNIQUE: 'unique'>
        >>> result.solution.to_array()
        array([2., 1.])
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = _ensure_design(equations, tolerance)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return SystemSolution(_result=result, _design=design)


def _ensure_design(
    equations: Sequence[LinearEquation] | SystemDesign,
    tolerance: Any,
) -> SystemDesign:
    """Convert equations to SystemDesign if needed."""
    if isinstance(equations, SystemDesign):
        if tolerance is None:
            return equations
        return SystemDesign.from_equations(equations.equations, tolerance=tolerance)
    if isinstance(equations, LinearEquation):
        raise ValidationError(
            "equations: expected a sequence of LinearEquation, got a single equation"
        )
    return SystemDesign.from_equations(equations, tolerance=tolerance)


def _get_backend(choice: BackendChoice) -> Backend[SystemDesign, SystemParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUGaussJordanBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
