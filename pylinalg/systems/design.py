"""
SystemDesign: validated input for the linear-system solver.

Design wraps the equations of a system and extracts the coefficient
matrix A (one row per equation normal vector) and the offsets b. It is
the boundary of the solver: everything is validated here and trusted
everywhere downstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    ValidationError, DimensionError, DegenerateInputError,
)
from pylinalg.core.validation import (
    check_array, check_finite, check_1d, check_2d, check_consistent_length,
)
from pylinalg.core.compute.tolerances import resolve_tolerance
from pylinalg.primitives.vector import Vector
from pylinalg.primitives.equation import LinearEquation
from pylinalg.systems._format import format_augmented


@dataclass(frozen=True)
class SystemDesign:
    """
    Linear system A x = b.

    Immutable after construction; A and b are read-only copies.

    Construction:
        SystemDesign.from_equations([Line(1, 1, 3), Line(1, -1, 1)])
        SystemDesign.from_arrays([[1, 1], [1, -1]], [3, 1])
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _tolerance: float
    _equations: tuple[LinearEquation, ...]

    @classmethod
    def from_equations(
        cls,
        equations: Sequence[LinearEquation],
        *,
        tolerance: Any = None,
    ) -> SystemDesign:
        """
        Build a design from LinearEquation objects.

        Args:
            equations: Non-empty sequence of equations sharing one dimension
            tolerance: Tolerance for the whole system. When None, the
                equations must all carry the same tolerance and it is used

        Raises:
            DegenerateInputError: If the sequence is empty
            DimensionError: If the equations have different dimensions
            ValidationError: If an element is not a LinearEquation, or if
                no tolerance is given and the equations carry different ones
        """
        equations = tuple(equations)
        if not equations:
            raise DegenerateInputError("equations: system has no equations")
        for i, eq in enumerate(equations):
            if not isinstance(eq, LinearEquation):
                raise ValidationError(
                    f"equations[{i}]: expected LinearEquation, got {type(eq).__name__}"
                )

        dims = [eq.dimensions for eq in equations]
        if len(set(dims)) > 1:
            details = ", ".join(f"equations[{i}]={d}" for i, d in enumerate(dims))
            raise DimensionError(f"Inconsistent equation dimensions: {details}")

        if tolerance is None:
            tols = [eq.tolerance for eq in equations]
            if len(set(tols)) > 1:
                details = ", ".join(f"equations[{i}]={t:g}" for i, t in enumerate(tols))
                raise ValidationError(
                    f"Inconsistent equation tolerances: {details}; pass tolerance= to choose one"
                )
            tol = tols[0]
        else:
            tol = resolve_tolerance(tolerance)
        A = np.vstack([eq.normal_vector.to_array() for eq in equations])
        b = np.array([eq.k for eq in equations], dtype=np.float64)
        return cls._build(A, b, tol, equations)

    @classmethod
    def from_arrays(
        cls,
        A: ArrayLike,
        b: ArrayLike,
        *,
        tolerance: Any = None,
    ) -> SystemDesign:
        """Build a design from a coefficient matrix and offsets."""
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        if A_arr.ndim == 1:
            A_arr = A_arr.reshape(1, -1)
        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()
        if b_arr.ndim == 0:
            b_arr = b_arr.reshape(1)
        check_2d(A_arr, 'A')
        check_1d(b_arr, 'b')
        if A_arr.shape[0] == 0:
            raise DegenerateInputError("A: system has no equations")
        if A_arr.shape[1] == 0:
            raise DegenerateInputError("A: equations have no unknowns")
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        tol = resolve_tolerance(tolerance)
        equations = tuple(
            LinearEquation(Vector.from_values(row, tolerance=tol), k)
            for row, k in zip(A_arr, b_arr)
        )
        return cls._build(A_arr, b_arr, tol, equations)

    @classmethod
    def _build(
        cls,
        A: NDArray,
        b: NDArray,
        tolerance: float,
        equations: tuple[LinearEquation, ...],
    ) -> SystemDesign:
        """Internal builder; inputs already validated."""
        A = np.array(A, dtype=np.float64)
        b = np.array(b, dtype=np.float64)
        A.flags.writeable = False
        b.flags.writeable = False
        return cls(_A=A, _b=b, _tolerance=tolerance, _equations=equations)

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (m x d), read-only."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Offsets (m,), read-only."""
        return self._b

    @property
    def n_equations(self) -> int:
        return self._A.shape[0]

    @property
    def dimensions(self) -> int:
        """Number of unknowns."""
        return self._A.shape[1]

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def equations(self) -> tuple[LinearEquation, ...]:
        return self._equations

    # === Checks ===

    def residuals(self, x: Vector | ArrayLike) -> NDArray[np.floating[Any]]:
        """A x - b for a candidate point x."""
        point = x.to_array() if isinstance(x, Vector) else check_array(x, 'x').ravel()
        if point.size != self.dimensions:
            raise DimensionError(
                f"x: expected {self.dimensions} coordinates, got {point.size}"
            )
        return self._A @ point - self._b

    def is_satisfied_by(self, x: Vector | ArrayLike) -> bool:
        """True if every equation holds at x within tolerance."""
        return bool(np.all(np.abs(self.residuals(x)) < self._tolerance))

    def format(self, precision: int = 6) -> str:
        """Augmented matrix [A | b] as text."""
        return format_augmented(self._A, self._b, precision=precision)

    def __repr__(self) -> str:
        return (
            f"SystemDesign(n_equations={self.n_equations}, "
            f"dimensions={self.dimensions}, tolerance={self._tolerance:g})"
        )
