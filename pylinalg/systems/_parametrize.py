"""
Parametric description of an under-determined system.

Given a consistent system already in reduced row-echelon form, builds
the general solution

    x = base_point + sum_k t_k * direction_vectors[k]

with one direction vector per free (non-pivot) variable.

Algorithm:
    1. Base point: for each pivot (row, variable), x[variable] = b[row].
       Free variables are zero.
    2. Alignment: place each pivot row at the index of its pivot
       variable in a d x d table; every other row of the table is zero.
    3. Direction vectors: for each free variable i,
       direction[j] = -aligned[j, i] for every j, then direction[i] = 1.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.primitives.vector import Vector
from pylinalg.systems._pivots import find_pivots
from pylinalg.systems.solution import Parametrization


class Parametrizer:
    """
    Builds a Parametrization from a reduced row-echelon system.

    The input must already be RREF, consistent and rank-deficient; this
    class does not re-derive the classification. Pivots are read with the
    same leftmost-nonzero rule the elimination engine uses.
    """

    def __init__(
        self,
        rref: NDArray[np.floating[Any]],
        offsets: NDArray[np.floating[Any]],
        tolerance: float,
    ):
        self._rref = np.asarray(rref, dtype=np.float64)
        self._offsets = np.asarray(offsets, dtype=np.float64)
        self._tolerance = tolerance
        self._dimensions = self._rref.shape[1]

    def parametrize(self) -> Parametrization:
        pivots = find_pivots(self._rref, self._tolerance)
        base_point = self._base_point(pivots)
        aligned = self._align_rows(pivots)

        pivot_variables = {variable for _, variable in pivots}
        directions: list[Vector] = []
        free_variables: list[int] = []
        for i in range(self._dimensions):
            if i in pivot_variables:
                continue
            directions.append(self._direction_vector(aligned, i))
            free_variables.append(i + 1)

        return Parametrization(
            dimensions=self._dimensions,
            base_point=Vector.from_values(base_point, tolerance=self._tolerance),
            direction_vectors=tuple(directions),
            free_variables=tuple(free_variables),
        )

    def _base_point(self, pivots: tuple[tuple[int, int], ...]) -> NDArray[np.floating[Any]]:
        point = np.zeros(self._dimensions)
        for row, variable in pivots:
            point[variable] = self._offsets[row]
        return point

    def _align_rows(self, pivots: tuple[tuple[int, int], ...]) -> NDArray[np.floating[Any]]:
        """d x d table whose row j is the pivot row of variable j, or zeros."""
        aligned = np.zeros((self._dimensions, self._dimensions))
        for row, variable in pivots:
            aligned[variable] = self._rref[row]
        return aligned

    def _direction_vector(self, aligned: NDArray[np.floating[Any]], free: int) -> Vector:
        direction = -aligned[:, free]
        direction[free] = 1.0
        # -0.0 -> 0.0
        direction = direction + 0.0
        return Vector.from_values(direction, tolerance=self._tolerance)
