"""
Tests for LinearEquation, Line and Plane.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import DegenerateInputError, ValidationError
from pylinalg.primitives import LinearEquation, Line, Plane, Vector


class TestConstruction:

    def test_line(self):
        line = Line(2, 3, 4)
        assert line.dimensions == 2
        assert line.k == 4.0
        np.testing.assert_array_equal(line.normal_vector.to_array(), [2, 3])

    def test_plane(self):
        plane = Plane(1, 2, 3, 4)
        assert plane.dimensions == 3
        assert plane.normal_vector.vertical

    def test_horizontal_normal_stored_vertical(self):
        eq = LinearEquation(Vector([[1, 2]]), 3)
        assert eq.normal_vector.vertical

    def test_from_coefficients(self):
        eq = LinearEquation.from_coefficients([1, 0, -1], 2, tolerance=1e-6)
        assert eq.dimensions == 3
        assert eq.tolerance == 1e-6

    def test_rejects_non_vector(self):
        with pytest.raises(ValidationError, match="expected Vector"):
            LinearEquation([1, 2], 3)

    def test_rejects_non_finite_k(self):
        with pytest.raises(ValidationError):
            Line(1, 1, float('nan'))


class TestGeometry:

    def test_is_parallel(self):
        assert Line(1, 1, 1).is_parallel(Line(2, 2, 7))
        assert not Line(1, 1, 1).is_parallel(Line(1, -1, 1))

    def test_base_point(self):
        np.testing.assert_array_equal(Line(2, 3, 4).base_point().to_array(), [2, 0])

    def test_base_point_skips_zero_component(self):
        np.testing.assert_array_equal(Plane(0, 0, 4, 8).base_point().to_array(), [0, 0, 2])

    def test_base_point_zero_normal(self):
        with pytest.raises(DegenerateInputError):
            Line(0, 0, 1).base_point()

    def test_contains(self):
        line = Line(1, 1, 3)
        assert line.contains([1, 2])
        assert line.contains(Vector([3, 0]))
        assert not line.contains([1, 1])

    def test_contains_wrong_size(self):
        with pytest.raises(ValidationError):
            Line(1, 1, 3).contains([1, 2, 3])


class TestIsEqual:

    def test_scaled_equation_is_equal(self):
        assert Line(1, 1, 1).is_equal(Line(2, 2, 2))

    def test_parallel_distinct(self):
        assert not Line(1, 1, 1).is_equal(Line(1, 1, 5))

    def test_non_parallel_never_equal(self):
        # Both lines pass through the origin; only a parallel check rules this out
        assert not Line(1, 0, 0).is_equal(Line(0, 1, 0))

    def test_planes(self):
        assert Plane(-0.412, 3.806, 0.728, -3.46).is_equal(
            Plane(1.03, -9.515, -1.82, 8.65)
        )
        assert not Plane(2.611, 5.528, 0.283, 4.6).is_equal(
            Plane(7.715, 8.306, 5.342, 3.76)
        )

    def test_zero_normals(self):
        assert Line(0, 0, 0).is_equal(Line(0, 0, 0))
        assert not Line(0, 0, 0).is_equal(Line(0, 0, 1))
        assert not Line(0, 0, 0).is_equal(Line(1, 0, 0))


class TestFormat:

    def test_format(self):
        assert Line(2, -3, 4).format() == "2v1 - 3v2 = 4"

    def test_format_unit_and_zero(self):
        assert Plane(1, 0, -1, 0).format() == "v1 - v3 = 0"

    def test_format_leading_negative(self):
        assert Line(-1, 2.5, 1).format(symbol='x') == "-x1 + 2.5x2 = 1"

    def test_format_zero_lhs(self):
        assert Line(0, 0, 1).format() == "0 = 1"

    def test_repr(self):
        assert repr(Line(1, 1, 3)) == "Line('v1 + v2 = 3')"
