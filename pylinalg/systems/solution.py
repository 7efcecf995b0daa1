"""
Linear system solution types.

Contains the solution-set tag, the parametric description of an
under-determined system, the parameter payload and the user-facing
solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result
from pylinalg.core.exceptions import ValidationError
from pylinalg.primitives.vector import Vector
from pylinalg.systems._format import (
    format_augmented, format_parametric, format_as_vectors,
)

if TYPE_CHECKING:
    from pylinalg.systems.design import SystemDesign


class SolutionKind(str, Enum):
    """Classification of a system's solution set."""
    INCONSISTENT = 'inconsistent'
    UNIQUE = 'unique'
    INFINITE = 'infinite'


@dataclass(frozen=True)
class Parametrization:
    """
    General solution of a consistent, under-determined system.

    x = base_point + sum_k t_k * direction_vectors[k]

    free_variables[k] is the 1-based index of the variable that
    direction_vectors[k] parametrizes (its component there is 1).
    """
    dimensions: int
    base_point: Vector
    direction_vectors: tuple[Vector, ...]
    free_variables: tuple[int, ...]

    def __post_init__(self):
        if len(self.direction_vectors) != len(self.free_variables):
            raise ValidationError(
                f"Parametrization: {len(self.direction_vectors)} direction vectors "
                f"but {len(self.free_variables)} free variables"
            )

    @property
    def n_parameters(self) -> int:
        return len(self.direction_vectors)

    def point(self, *params: float) -> Vector:
        """Evaluate base_point + sum_k params[k] * direction_vectors[k]."""
        if len(params) != self.n_parameters:
            raise ValidationError(
                f"point: expected {self.n_parameters} parameters, got {len(params)}"
            )
        x = self.base_point.to_array()
        for t, direction in zip(params, self.direction_vectors):
            x = x + float(t) * direction.to_array()
        return Vector.from_values(x, tolerance=self.base_point.tolerance)

    def format(self, symbol: str = 'v', parameter: str = 't', precision: int = 6) -> str:
        """General solution, one line per coordinate ('v1 = 3 + 2t1 - t2')."""
        return "\n".join(format_parametric(
            self.base_point.to_array(),
            [v.to_array() for v in self.direction_vectors],
            self.base_point.tolerance,
            symbol=symbol,
            parameter=parameter,
            precision=precision,
        ))

    def format_as_vectors(self, symbol: str = 'v', decimals: int = 6) -> str:
        """General solution as a base column plus scaled direction columns."""
        return format_as_vectors(
            self.base_point.to_array(),
            [v.to_array() for v in self.direction_vectors],
            self.free_variables,
            symbol=symbol,
            decimals=decimals,
        )

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for a solved linear system.

    Pure data computed by backends. Exactly one of solution /
    parametrization is set for a consistent system; both are None when
    the system is inconsistent.
    """
    kind: SolutionKind
    rref: NDArray[np.floating[Any]]
    offsets: NDArray[np.floating[Any]]
    pivots: tuple[tuple[int, int], ...]
    rank: int
    solution: Vector | None = None
    parametrization: Parametrization | None = None


@dataclass
class SystemSolution:
    """
    User-facing linear system results.

    Wraps Result[SystemParams] and provides convenient accessors.
    """
    _result: Result[SystemParams]
    _design: 'SystemDesign'

    @property
    def params(self) -> SystemParams:
        return self._result.params

    @property
    def design(self) -> 'SystemDesign':
        return self._design

    @property
    def kind(self) -> SolutionKind:
        return self._result.params.kind

    @property
    def is_consistent(self) -> bool:
        return self.kind is not SolutionKind.INCONSISTENT

    @property
    def is_unique(self) -> bool:
        return self.kind is SolutionKind.UNIQUE

    @property
    def is_infinite(self) -> bool:
        return self.kind is SolutionKind.INFINITE

    @property
    def solution(self) -> Vector | None:
        """The unique solution, or None unless kind is UNIQUE."""
        return self._result.params.solution

    @property
    def parametrization(self) -> Parametrization | None:
        """The general solution, or None unless kind is INFINITE."""
        return self._result.params.parametrization

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def pivots(self) -> tuple[tuple[int, int], ...]:
        """(row, variable) pairs of the reduced matrix, 0-based."""
        return self._result.params.pivots

    @property
    def rref(self) -> NDArray[np.floating[Any]]:
        """Reduced row-echelon form of A (m x d)."""
        return self._result.params.rref

    @property
    def reduced_offsets(self) -> NDArray[np.floating[Any]]:
        """Offsets b after the same row operations (m,)."""
        return self._result.params.offsets

    @property
    def free_variables(self) -> tuple[int, ...]:
        """1-based indices of variables without a pivot."""
        pivot_vars = {v for _, v in self.pivots}
        return tuple(i + 1 for i in range(self._design.dimensions) if i not in pivot_vars)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable report of the system and its solution set."""
        lines = [
            "Linear System",
            "=" * 60,
            f"Equations: {self._design.n_equations}",
            f"Unknowns: {self._design.dimensions}",
            f"Rank: {self.rank}",
            f"Tolerance: {self._design.tolerance:g}",
            "",
            "System [A | b]:",
            self._design.format(),
            "",
            "Reduced row-echelon form:",
            self.format_rref(),
            "",
        ]

        if self.kind is SolutionKind.INCONSISTENT:
            lines.append("No solution exists for the system.")
        elif self.kind is SolutionKind.UNIQUE:
            lines.append("One solution exists for the system:")
            for i, x in enumerate(self.solution.to_array()):
                lines.append(f"  v{i + 1} = {x + 0.0:.6g}")
        else:
            lines.append("Infinitely many solutions exist for the system:")
            lines.extend(f"  {line}" for line in self.parametrization.format().splitlines())

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def format_rref(self, precision: int = 6) -> str:
        return format_augmented(self.rref, self.reduced_offsets, precision=precision)

    def __repr__(self) -> str:
        return (
            f"SystemSolution(kind={self.kind.value}, n_equations={self._design.n_equations}, "
            f"dimensions={self._design.dimensions}, rank={self.rank})"
        )
