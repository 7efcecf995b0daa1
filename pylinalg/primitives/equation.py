"""
Linear equations (hyperplanes).

A LinearEquation pairs a normal vector n with a scalar offset k and
represents the hyperplane n . x = k. Line and Plane are the 2-D and 3-D
convenience forms.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np

from pylinalg.core.exceptions import ValidationError, DegenerateInputError
from pylinalg.core.validation import check_array
from pylinalg.core.compute.tolerances import is_zero
from pylinalg.primitives.vector import Vector


class LinearEquation:
    """
    Hyperplane n . x = k.

    Immutable after construction. The normal vector is stored as a
    vertical Vector; its tolerance governs every comparison made by
    the equation.

    Construction:
        LinearEquation(Vector.from_values([1, 2]), 3)
        LinearEquation.from_coefficients([1, 2], 3)
    """

    __slots__ = ('_normal_vector', '_k')

    def __init__(self, normal_vector: Vector, k: float):
        if not isinstance(normal_vector, Vector):
            raise ValidationError(
                f"normal_vector: expected Vector, got {type(normal_vector).__name__}"
            )
        k = float(k)
        if not np.isfinite(k):
            raise ValidationError(f"k: must be finite, got {k}")
        if normal_vector.horizontal:
            normal_vector = normal_vector.transpose()
        self._normal_vector = normal_vector
        self._k = k

    @classmethod
    def from_coefficients(
        cls,
        coefficients: Sequence[float],
        k: float,
        *,
        tolerance: Any = None,
    ) -> LinearEquation:
        return cls(Vector.from_values(coefficients, tolerance=tolerance), k)

    @property
    def normal_vector(self) -> Vector:
        return self._normal_vector

    @property
    def k(self) -> float:
        return self._k

    @property
    def dimensions(self) -> int:
        return self._normal_vector.dimensions

    @property
    def tolerance(self) -> float:
        return self._normal_vector.tolerance

    def is_parallel(self, other: LinearEquation) -> bool:
        return self._normal_vector.is_parallel(other.normal_vector)

    def base_point(self) -> Vector:
        """
        A point on the hyperplane.

        The first coordinate with a nonzero normal component is set to
        k / n_i, every other coordinate to zero.

        Raises:
            DegenerateInputError: If the normal vector is zero
        """
        n = self._normal_vector.to_array()
        nonzero = np.flatnonzero(np.abs(n) >= self.tolerance)
        if nonzero.size == 0:
            raise DegenerateInputError(
                "LinearEquation.base_point: normal vector is zero, no base point"
            )
        point = np.zeros_like(n)
        i = nonzero[0]
        point[i] = self._k / n[i]
        return Vector.from_values(point, tolerance=self.tolerance)

    def contains(self, point: Vector | Sequence[float]) -> bool:
        """True if n . point equals k within tolerance."""
        p = point.to_array() if isinstance(point, Vector) else check_array(point, 'point').ravel()
        if p.size != self.dimensions:
            raise ValidationError(
                f"point: expected {self.dimensions} coordinates, got {p.size}"
            )
        return is_zero(float(self._normal_vector.to_array() @ p) - self._k, self.tolerance)

    def is_equal(self, other: LinearEquation) -> bool:
        """
        True if both equations describe the same hyperplane.

        Coincidence is only tested for parallel equations: non-parallel
        hyperplanes are never equal. For parallel ones, the vector
        connecting a point of each must be orthogonal to the normal.
        """
        n1_zero = self._normal_vector.is_zero()
        n2_zero = other.normal_vector.is_zero()
        if n1_zero or n2_zero:
            if not (n1_zero and n2_zero):
                return False
            tol = self.tolerance
            return is_zero(self._k, tol) == is_zero(other.k, tol)

        if not self.is_parallel(other):
            return False

        p1 = self.base_point().to_array()
        p2 = other.base_point().to_array()
        connecting = Vector.from_points(p1, p2, tolerance=self.tolerance)
        return connecting.is_orthogonal(self._normal_vector)

    def format(self, symbol: str = 'v', precision: int = 6) -> str:
        """
        Render as text, e.g. '2v1 - 3v2 = 4'.

        Zero coefficients are omitted; an all-zero left side renders as 0.
        """
        terms: list[str] = []
        for i, c in enumerate(self._normal_vector.to_array()):
            if is_zero(c, self.tolerance):
                continue
            name = f"{symbol}{i + 1}"
            magnitude = abs(c)
            coef = "" if abs(magnitude - 1.0) < self.tolerance else f"{magnitude:.{precision}g}"
            if not terms:
                terms.append(f"{'-' if c < 0 else ''}{coef}{name}")
            else:
                terms.append(f"{'-' if c < 0 else '+'} {coef}{name}")
        lhs = " ".join(terms) if terms else "0"
        return f"{lhs} = {self._k:.{precision}g}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.format()!r})"


class Line(LinearEquation):
    """2-D line a*x + b*y = k."""

    __slots__ = ()

    def __init__(self, a: float, b: float, k: float, *, tolerance: Any = None):
        super().__init__(Vector.from_values([a, b], tolerance=tolerance), k)


class Plane(LinearEquation):
    """3-D plane a*x + b*y + c*z = k."""

    __slots__ = ()

    def __init__(self, a: float, b: float, c: float, k: float, *, tolerance: Any = None):
        super().__init__(Vector.from_values([a, b, c], tolerance=tolerance), k)
