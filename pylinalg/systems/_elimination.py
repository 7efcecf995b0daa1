"""
Gauss-Jordan elimination engine.

Reduces A x = b to reduced row-echelon form and classifies the solution
set. The working rows are private copies of the design's arrays; nothing
partially reduced ever leaves the engine.

Algorithm:
    1. Triangular pass. At (row, variable), take the lowest row at or
       below `row` with a nonzero entry in column `variable`, moving to
       the next column when no row has one. A skipped column is set to
       zero from `row` down. Swap the pivot row into place and eliminate
       the column from every row below. Advance to (row + 1, variable + 1).
    2. Reduced pass. Re-scan pivots left-to-right, top-to-bottom. For each
       pivot, eliminate its column from every row above, then scale the
       row so the pivot is exactly 1.
    3. Classification. Any all-zero row with a nonzero offset makes the
       system inconsistent. Otherwise a variable without a pivot makes the
       solution set infinite; with a pivot in every column it is unique.

Pivot choice is deterministic (lowest row, leftmost column), not a
numerically optimal pivoting strategy. Every zero test compares against
the design tolerance.
"""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import InvariantViolationError
from pylinalg.core.compute.tolerances import NEAR_ZERO_FACTOR, is_zero
from pylinalg.primitives.vector import Vector
from pylinalg.systems._pivots import iter_pivots
from pylinalg.systems._parametrize import Parametrizer
from pylinalg.systems.solution import SolutionKind, Parametrization

if TYPE_CHECKING:
    from pylinalg.core.compute.timing import Timer
    from pylinalg.systems.design import SystemDesign


@dataclass(frozen=True)
class EliminationReport:
    """Outcome of one solve: the tag, the reduced system and any payload."""
    kind: SolutionKind
    matrix: NDArray[np.floating[Any]]
    offsets: NDArray[np.floating[Any]]
    pivots: tuple[tuple[int, int], ...]
    solution: Vector | None = None
    parametrization: Parametrization | None = None
    small_pivots: tuple[tuple[int, int, float], ...] = ()

    @property
    def rank(self) -> int:
        return len(self.pivots)


class EliminationEngine:
    """
    Row-reduces one linear system.

    Each engine owns its working copy of the system and reduces it once.
    """

    def __init__(self, design: 'SystemDesign'):
        self._rows = np.array(design.A, dtype=np.float64)
        self._offsets = np.array(design.b, dtype=np.float64)
        self._tolerance = design.tolerance
        self._n_rows, self._dimensions = self._rows.shape
        self._small_pivots: list[tuple[int, int, float]] = []
        self._report: EliminationReport | None = None

    def solve(self, timer: 'Timer | None' = None) -> EliminationReport:
        """
        Reduce, classify and (for infinite solution sets) parametrize.

        The working rows are reduced in place, so the report of the first
        call is returned again on later calls.

        Args:
            timer: Optional Timer; sections are recorded when given

        Raises:
            InvariantViolationError: If a selected pivot reads as zero
                when it is scaled to one
        """
        if self._report is not None:
            return self._report

        def section(name: str):
            return timer.section(name) if timer is not None else nullcontext()

        with section('triangular_form'):
            self._triangular_form()

        with section('reduced_row_echelon'):
            pivots = self._reduced_row_echelon_form()

        with section('classification'):
            kind = self._classify(pivots)

        matrix = self._rows.copy()
        offsets = self._offsets.copy()
        matrix.flags.writeable = False
        offsets.flags.writeable = False

        solution = None
        parametrization = None
        if kind is SolutionKind.UNIQUE:
            solution = self._unique_solution(pivots)
        elif kind is SolutionKind.INFINITE:
            with section('parametrization'):
                parametrization = Parametrizer(matrix, offsets, self._tolerance).parametrize()

        self._report = EliminationReport(
            kind=kind,
            matrix=matrix,
            offsets=offsets,
            pivots=pivots,
            solution=solution,
            parametrization=parametrization,
            small_pivots=tuple(self._small_pivots),
        )
        return self._report

    # === Passes ===

    def _triangular_form(self) -> None:
        row = 0
        variable = 0
        while row < self._n_rows and variable < self._dimensions:
            found = self._find_pivot_row(row, variable)
            if found is None:
                self._rows[row:, variable:] = 0.0
                break
            pivot_row, pivot_variable = found

            # Skipped columns were judged zero below `row`; later row
            # operations must not scale their residue back above tolerance.
            self._rows[row:, variable:pivot_variable] = 0.0
            variable = pivot_variable

            if pivot_row != row:
                self._swap_rows(row, pivot_row)

            value = self._rows[row, variable]
            if abs(value) < NEAR_ZERO_FACTOR * self._tolerance:
                self._small_pivots.append((row, variable, float(value)))

            self._eliminate_below(row, variable)

            row += 1
            variable += 1

    def _reduced_row_echelon_form(self) -> tuple[tuple[int, int], ...]:
        pivots = []
        for row, variable in iter_pivots(self._rows, self._tolerance):
            self._eliminate_above(row, variable)
            self._reduce_pivot_to_one(row, variable)
            pivots.append((row, variable))

        # Entries left within tolerance of zero by rounding are zero.
        self._rows[np.abs(self._rows) < self._tolerance] = 0.0
        self._offsets[np.abs(self._offsets) < self._tolerance] = 0.0
        return tuple(pivots)

    def _classify(self, pivots: tuple[tuple[int, int], ...]) -> SolutionKind:
        if not self._is_consistent():
            return SolutionKind.INCONSISTENT
        if len(pivots) < self._dimensions:
            return SolutionKind.INFINITE
        return SolutionKind.UNIQUE

    def _is_consistent(self) -> bool:
        """False if some row reads 0 = k with k nonzero."""
        zero_rows = np.all(np.abs(self._rows) < self._tolerance, axis=1)
        nonzero_offsets = np.abs(self._offsets) >= self._tolerance
        return not bool(np.any(zero_rows & nonzero_offsets))

    def _unique_solution(self, pivots: tuple[tuple[int, int], ...]) -> Vector:
        x = np.zeros(self._dimensions)
        for row, variable in pivots:
            x[variable] = self._offsets[row]
        return Vector.from_values(x, tolerance=self._tolerance)

    # === Pivot search ===

    def _find_pivot_row(self, row: int, variable: int) -> tuple[int, int] | None:
        """
        Lowest row at or below `row` that is nonzero in the leftmost
        possible column at or after `variable`.
        """
        for v in range(variable, self._dimensions):
            column = np.abs(self._rows[row:, v])
            candidates = np.flatnonzero(column >= self._tolerance)
            if candidates.size:
                return row + int(candidates[0]), v
        return None

    # === Elimination ===

    def _eliminate_below(self, row: int, variable: int) -> None:
        for i in range(row + 1, self._n_rows):
            self._eliminate_variable_in_row(variable, row, i)

    def _eliminate_above(self, row: int, variable: int) -> None:
        for i in range(row - 1, -1, -1):
            self._eliminate_variable_in_row(variable, row, i)

    def _eliminate_variable_in_row(self, variable: int, source: int, target: int) -> None:
        """Zero out `variable` in `target` by adding a multiple of `source`."""
        entry = self._rows[target, variable]
        pivot = self._rows[source, variable]
        if is_zero(entry, self._tolerance) or is_zero(pivot, self._tolerance):
            return
        self._add_multiple_of_row(-entry / pivot, source, target)
        self._rows[target, variable] = 0.0

    def _reduce_pivot_to_one(self, row: int, variable: int) -> None:
        pivot = self._rows[row, variable]
        if is_zero(pivot, self._tolerance):
            raise InvariantViolationError(
                f"Pivot at row {row}, variable {variable} reads {pivot!r}, "
                f"within tolerance {self._tolerance:g} of zero",
                row=row,
                variable=variable,
                value=float(pivot),
                tolerance=self._tolerance,
            )
        self._multiply_row(1.0 / pivot, row)
        self._rows[row, variable] = 1.0

    # === Elementary row operations ===

    def _swap_rows(self, row1: int, row2: int) -> None:
        """R1 <-> R2"""
        self._rows[[row1, row2]] = self._rows[[row2, row1]]
        self._offsets[[row1, row2]] = self._offsets[[row2, row1]]

    def _multiply_row(self, scalar: float, row: int) -> None:
        """c * R -> R"""
        self._rows[row] *= scalar
        self._offsets[row] *= scalar

    def _add_multiple_of_row(self, scalar: float, source: int, target: int) -> None:
        """c * R_source + R_target -> R_target"""
        self._rows[target] += scalar * self._rows[source]
        self._offsets[target] += scalar * self._offsets[source]
