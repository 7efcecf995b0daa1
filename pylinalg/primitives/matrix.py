"""
Dense matrix primitive.

Matrix wraps a read-only 2-D float64 array together with the tolerance
used for every equality and zero test on it. Shapes are fixed at
construction; arithmetic returns new containers that inherit the
tolerance of the left operand.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import ShapeMismatchError
from pylinalg.core.validation import (
    check_array, check_2d, check_finite, check_not_empty, check_index,
)
from pylinalg.core.compute.tolerances import resolve_tolerance, is_close

if TYPE_CHECKING:
    from pylinalg.primitives.vector import Vector


class Matrix:
    """
    Fixed-size dense matrix with tolerance-aware comparison.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix(elements, tolerance=1e-12)
        Matrix(elements, tolerance='strict')
    """

    __slots__ = ('_elements', '_tolerance')

    def __init__(self, elements: ArrayLike, tolerance: Any = None):
        arr = check_array(elements, 'elements')
        check_2d(arr, 'elements')
        check_not_empty(arr, 'elements')
        check_finite(arr, 'elements')
        arr.flags.writeable = False
        self._elements = arr
        self._tolerance = resolve_tolerance(tolerance)

    # === Properties ===

    @property
    def elements(self) -> NDArray[np.floating[Any]]:
        """Read-only (rows x columns) array."""
        return self._elements

    @property
    def rows(self) -> int:
        return self._elements.shape[0]

    @property
    def columns(self) -> int:
        return self._elements.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the underlying array."""
        return self._elements.copy()

    def _like(self, elements: NDArray) -> Matrix:
        """New container of the same family carrying this tolerance."""
        return type(self)(elements, self._tolerance)

    def _require_same_size(self, other: Matrix, operation: str) -> None:
        if not self.is_same_size(other):
            raise ShapeMismatchError(
                f"{type(self).__name__}.{operation}: shapes {self.shape} and "
                f"{other.shape} must be equal",
                operation=operation,
                left_shape=self.shape,
                right_shape=other.shape,
            )

    # === Arithmetic ===

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product: (m x n)(n x p) = (m x p).

        The number of columns of this matrix must equal the number of
        rows of other. Always returns a plain Matrix.
        """
        if self.columns != other.rows:
            raise ShapeMismatchError(
                f"{type(self).__name__}.multiply: {self.columns} columns do not "
                f"match {other.rows} rows of the right operand",
                operation='multiply',
                left_shape=self.shape,
                right_shape=other.shape,
            )
        return Matrix(self._elements @ other.elements, self._tolerance)

    def scalar_multiply(self, scalar: float) -> Matrix:
        return self._like(self._elements * float(scalar))

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum; shapes must be equal."""
        self._require_same_size(other, 'add')
        return self._like(self._elements + other.elements)

    def subtract(self, other: Matrix) -> Matrix:
        """self - other; shapes must be equal."""
        self._require_same_size(other, 'subtract')
        return self._like(self._elements - other.elements)

    def transpose(self) -> Matrix:
        """(m x n)^T = (n x m)."""
        return self._like(self._elements.T)

    # === Comparison ===

    def is_zero(self) -> bool:
        """True if every entry is within tolerance of zero."""
        return bool(np.all(np.abs(self._elements) < self._tolerance))

    def equals_value(self, value: float, i: int, j: int) -> bool:
        """True if entry (i, j) is within tolerance of value."""
        i = check_index(i, self.rows, 'i')
        j = check_index(j, self.columns, 'j')
        return is_close(float(self._elements[i, j]), value, self._tolerance)

    def is_same_size(self, other: Matrix) -> bool:
        return self.shape == other.shape

    def is_equal(self, other: Matrix) -> bool:
        """Same shape and every entry pairwise within tolerance."""
        if not self.is_same_size(other):
            return False
        diff = np.abs(self._elements - other.elements)
        return bool(np.all(diff < self._tolerance))

    # === Extraction ===

    def get_row(self, index: int) -> Vector:
        """Row as a horizontal (1 x columns) Vector."""
        from pylinalg.primitives.vector import Vector
        index = check_index(index, self.rows, 'row')
        return Vector(self._elements[index:index + 1, :], self._tolerance)

    def get_column(self, index: int) -> Vector:
        """Column as a vertical (rows x 1) Vector."""
        from pylinalg.primitives.vector import Vector
        index = check_index(index, self.columns, 'column')
        return Vector(self._elements[:, index:index + 1], self._tolerance)

    # === Display ===

    def format(self, precision: int = 6) -> str:
        """Row-per-line textual rendering."""
        cells = [[f"{x + 0.0:.{precision}g}" for x in row] for row in self._elements]
        width = max(len(c) for row in cells for c in row)
        return "\n".join(
            " ".join(c.rjust(width) for c in row) for row in cells
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape}, tolerance={self._tolerance:g})"
