"""
Vector primitive.

A Vector is a Matrix with exactly one extent equal to 1. It records its
orientation (vertical = column, horizontal = row) and its number of
dimensions (the non-unit extent). A 1 x 1 array is a one-dimensional
column vector.
"""

from __future__ import annotations

from typing import Any, Sequence
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError, ShapeMismatchError, DegenerateInputError,
)
from pylinalg.core.validation import check_array, check_index
from pylinalg.core.compute.tolerances import is_close
from pylinalg.primitives.matrix import Matrix


class Vector(Matrix):
    """
    Row or column vector with tolerance-aware comparison.

    Construction:
        Vector([[1], [2], [3]])                    # vertical, 3 dimensions
        Vector([[1, 2, 3]])                        # horizontal, 3 dimensions
        Vector([1, 2, 3])                          # 1-D input -> vertical
        Vector.from_values([1, 2], horizontal=True)
        Vector.zeros(4)
        Vector.from_points([0, 0], [3, 4])         # points from p1 to p2
    """

    __slots__ = ()

    def __init__(self, elements: ArrayLike, tolerance: Any = None):
        arr = check_array(elements, 'elements')
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2 or (arr.shape[0] != 1 and arr.shape[1] != 1):
            raise DimensionError(
                f"Vector must be either Nx1 (vertical) or 1xN (horizontal), "
                f"got shape {arr.shape}"
            )
        super().__init__(arr, tolerance)

    @classmethod
    def from_values(
        cls,
        values: Sequence[float] | NDArray,
        *,
        horizontal: bool = False,
        tolerance: Any = None,
    ) -> Vector:
        arr = check_array(values, 'values').ravel()
        shape = (1, arr.size) if horizontal else (arr.size, 1)
        return cls(arr.reshape(shape), tolerance)

    @classmethod
    def zeros(cls, dimensions: int, *, horizontal: bool = False, tolerance: Any = None) -> Vector:
        return cls.from_values(np.zeros(dimensions), horizontal=horizontal, tolerance=tolerance)

    @classmethod
    def from_points(
        cls,
        p1: Sequence[float],
        p2: Sequence[float],
        *,
        tolerance: Any = None,
    ) -> Vector:
        """Vertical vector pointing from p1 to p2."""
        a = check_array(p1, 'p1').ravel()
        b = check_array(p2, 'p2').ravel()
        if a.size != b.size:
            raise ShapeMismatchError(
                f"Vector.from_points: points have {a.size} and {b.size} dimensions",
                operation='from_points',
                left_shape=a.shape,
                right_shape=b.shape,
            )
        return cls.from_values(b - a, tolerance=tolerance)

    # === Properties ===

    @property
    def horizontal(self) -> bool:
        return self.rows == 1 and self.columns > 1

    @property
    def vertical(self) -> bool:
        return not self.horizontal

    @property
    def dimensions(self) -> int:
        return self.elements.size

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Flat (dimensions,) copy of the components."""
        return self.elements.ravel().copy()

    def element(self, position: int) -> float:
        position = check_index(position, self.dimensions, 'position')
        return float(self.elements.ravel()[position])

    def equals_value(self, value: float, position: int) -> bool:  # type: ignore[override]
        """True if component `position` is within tolerance of value."""
        return is_close(self.element(position), value, self.tolerance)

    def _require_same_dimensions(self, other: Vector, operation: str) -> None:
        if self.dimensions != other.dimensions:
            raise ShapeMismatchError(
                f"Vector.{operation}: vectors must have the same dimensions, "
                f"got {self.dimensions} and {other.dimensions}",
                operation=operation,
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def _require_nonzero(self, *vectors: Vector, operation: str) -> None:
        if any(v.is_zero() for v in vectors):
            raise DegenerateInputError(f"Vector.{operation}: cannot use a zero vector")

    def _require_3d(self, other: Vector, operation: str) -> None:
        if not self.is_3_dimensional() or not other.is_3_dimensional():
            raise DimensionError(f"Vector.{operation}: vectors must be 3 dimensional")

    # === Norms and angles ===

    def magnitude(self) -> float:
        """||V|| = sqrt(V1^2 + V2^2 + ... + Vn^2)"""
        return float(np.linalg.norm(self.elements))

    def normalize(self) -> Vector:
        """U = V / ||V||"""
        self._require_nonzero(self, operation='normalize')
        return self.scalar_multiply(1.0 / self.magnitude())

    def dot(self, other: Vector) -> float:
        """V.W = V1*W1 + V2*W2 + ... + Vn*Wn, regardless of orientation."""
        self._require_same_dimensions(other, 'dot')
        return float(np.dot(self.elements.ravel(), other.elements.ravel()))

    def angle(self, other: Vector, *, degrees: bool = False) -> float:
        """Theta = arccos((V.W) / (||V|| * ||W||)), in radians by default."""
        self._require_same_dimensions(other, 'angle')
        self._require_nonzero(self, other, operation='angle')
        cosine = self.dot(other) / (self.magnitude() * other.magnitude())
        theta = math.acos(min(1.0, max(-1.0, cosine)))
        return math.degrees(theta) if degrees else theta

    # === Relations ===

    def is_parallel(self, other: Vector) -> bool:
        """
        True if one vector is a scalar multiple of the other.

        The zero vector is parallel to every vector.
        """
        self._require_same_dimensions(other, 'is_parallel')
        if self.is_zero() or other.is_zero():
            return True
        u = self.to_array() / self.magnitude()
        w = other.to_array() / other.magnitude()
        tol = self.tolerance
        return bool(np.all(np.abs(u - w) < tol) or np.all(np.abs(u + w) < tol))

    def is_orthogonal(self, other: Vector) -> bool:
        return abs(self.dot(other)) < self.tolerance

    # === Decomposition ===

    def projection(self, onto: Vector) -> Vector:
        """Projection of this vector onto `onto`."""
        self._require_same_dimensions(onto, 'projection')
        self._require_nonzero(self, onto, operation='projection')
        unit = onto.normalize()
        return Vector(unit.elements.reshape(self.shape), self.tolerance).scalar_multiply(
            self.dot(unit)
        )

    def orthogonal_component(self, onto: Vector) -> Vector:
        """Component of this vector orthogonal to `onto`."""
        return self.subtract(self.projection(onto))

    def parallel_component(self, onto: Vector) -> Vector:
        """Component of this vector parallel to `onto`."""
        return self.subtract(self.orthogonal_component(onto))

    # === 3-D geometry ===

    def is_3_dimensional(self) -> bool:
        return self.dimensions == 3

    def cross(self, other: Vector) -> Vector:
        """V x W for 3-dimensional vectors; returns a vertical vector."""
        self._require_3d(other, 'cross')
        return Vector.from_values(
            np.cross(self.to_array(), other.to_array()), tolerance=self.tolerance
        )

    def area_of_parallelogram(self, other: Vector) -> float:
        """||V x W||"""
        self._require_3d(other, 'area_of_parallelogram')
        return self.cross(other).magnitude()

    def area_of_triangle(self, other: Vector) -> float:
        """||V x W|| / 2"""
        self._require_3d(other, 'area_of_triangle')
        return 0.5 * self.area_of_parallelogram(other)

    def __repr__(self) -> str:
        orientation = 'horizontal' if self.horizontal else 'vertical'
        values = ", ".join(f"{x:g}" for x in self.elements.ravel())
        return f"Vector([{values}], {orientation})"
