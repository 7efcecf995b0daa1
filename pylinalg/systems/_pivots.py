"""
Pivot discovery in echelon-form matrices.

Shared by the elimination engine (reduced row-echelon pass) and the
parametrizer so both read pivots with the same rule.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray


def next_pivot(
    matrix: NDArray[np.floating[Any]],
    row: int,
    variable: int,
    tolerance: float,
) -> tuple[int, int] | None:
    """
    First pivot at or after (row, variable).

    Scans row `row` from column `variable` rightwards for an entry outside
    +/- tolerance; if the rest of the row is zero, moves to the next row
    and restarts at column `variable`. Returns None once the rows run out.
    """
    m, d = matrix.shape
    if variable >= d:
        return None
    for r in range(row, m):
        nonzero = np.flatnonzero(np.abs(matrix[r, variable:]) >= tolerance)
        if nonzero.size:
            return r, variable + int(nonzero[0])
    return None


def iter_pivots(
    matrix: NDArray[np.floating[Any]],
    tolerance: float,
) -> Iterator[tuple[int, int]]:
    """
    Yield (row, variable) pivots left-to-right, top-to-bottom.

    After a pivot at (r, v) the scan resumes at (r + 1, v + 1), so no two
    pivots share a row or a column. Rows are read at the time of each
    step, so the caller may modify rows at or above the current pivot
    between steps.
    """
    row, variable = 0, 0
    while True:
        found = next_pivot(matrix, row, variable, tolerance)
        if found is None:
            return
        yield found
        row, variable = found[0] + 1, found[1] + 1


def find_pivots(
    matrix: NDArray[np.floating[Any]],
    tolerance: float,
) -> tuple[tuple[int, int], ...]:
    """All pivots of an echelon-form matrix, in discovery order."""
    return tuple(iter_pivots(matrix, tolerance))
