"""
Tests for the public solve() entry point.

Scenario tests pin down the documented examples; property tests check
solutions against numpy and scipy on random systems.
"""

import warnings

import numpy as np
import pytest
from scipy.linalg import null_space

from pylinalg import solve as top_level_solve
from pylinalg.core.exceptions import (
    ValidationError, DimensionError, DegenerateInputError,
)
from pylinalg.primitives import Line, Plane, LinearEquation
from pylinalg.systems import solve, SystemDesign, SolutionKind, SystemSolution


class TestScenarios:

    def test_two_lines_unique(self, unique_lines):
        result = solve(unique_lines)
        assert result.kind is SolutionKind.UNIQUE
        np.testing.assert_allclose(result.solution.to_array(), [2, 1])
        assert result.parametrization is None

    def test_coincident_planes_infinite(self, coincident_planes):
        result = solve(coincident_planes)
        assert result.kind is SolutionKind.INFINITE
        assert result.solution is None

        p = result.parametrization
        np.testing.assert_array_equal(p.base_point.to_array(), [1, 0, 0])
        assert p.free_variables == (2, 3)
        np.testing.assert_array_equal(p.direction_vectors[0].to_array(), [-1, 1, 0])
        np.testing.assert_array_equal(p.direction_vectors[1].to_array(), [-1, 0, 1])

    def test_parallel_lines_inconsistent(self, parallel_lines):
        result = solve(parallel_lines)
        assert result.kind is SolutionKind.INCONSISTENT
        assert result.solution is None
        assert result.parametrization is None

    def test_zero_normal_inconsistent(self, zero_row_system):
        result = solve(zero_row_system)
        assert result.kind is SolutionKind.INCONSISTENT

    def test_single_variable(self):
        result = solve([LinearEquation.from_coefficients([2.0], 6.0)])
        assert result.kind is SolutionKind.UNIQUE
        np.testing.assert_allclose(result.solution.to_array(), [3])
        assert result.solution.dimensions == 1

    def test_exported_at_top_level(self, unique_lines):
        assert top_level_solve(unique_lines).is_unique


class TestSolutionAccessors:

    def test_flags(self, unique_lines, coincident_planes, parallel_lines):
        unique = solve(unique_lines)
        infinite = solve(coincident_planes)
        none = solve(parallel_lines)

        assert unique.is_consistent and unique.is_unique and not unique.is_infinite
        assert infinite.is_consistent and infinite.is_infinite and not infinite.is_unique
        assert not none.is_consistent

    def test_rank_and_pivots(self, coincident_planes):
        result = solve(coincident_planes)
        assert result.rank == 1
        assert result.pivots == ((0, 0),)
        assert result.free_variables == (2, 3)

    def test_rref_and_offsets(self, unique_lines):
        result = solve(unique_lines)
        np.testing.assert_array_equal(result.rref, np.eye(2))
        np.testing.assert_allclose(result.reduced_offsets, [2, 1])

    def test_info(self, coincident_planes):
        info = solve(coincident_planes).info
        assert info['method'] == 'gauss_jordan'
        assert info['kind'] == 'infinite'
        assert info['rank'] == 1
        assert info['n_equations'] == 2
        assert info['dimensions'] == 3
        assert info['n_free'] == 2
        assert info['tolerance'] == 1e-9

    def test_timing(self, coincident_planes):
        timing = solve(coincident_planes).timing
        assert timing['total_seconds'] >= 0.0
        for name in ('triangular_form', 'reduced_row_echelon', 'classification', 'parametrization'):
            assert name in timing

    def test_backend_name(self, unique_lines):
        assert solve(unique_lines).backend_name == 'cpu_gauss_jordan'

    def test_design_kept(self, unique_lines):
        result = solve(unique_lines)
        assert result.design.n_equations == 2
        assert result.design.equations == tuple(unique_lines)

    def test_repr(self, unique_lines):
        assert repr(solve(unique_lines)) == (
            "SystemSolution(kind=unique, n_equations=2, dimensions=2, rank=2)"
        )

    def test_summary_unique(self, unique_lines):
        text = solve(unique_lines).summary()
        assert "One solution exists for the system:" in text
        assert "  v1 = 2" in text
        assert "  v2 = 1" in text
        assert "Backend: cpu_gauss_jordan" in text

    def test_summary_infinite(self, coincident_planes):
        text = solve(coincident_planes).summary()
        assert "Infinitely many solutions exist for the system:" in text
        assert "  v1 = 1 - t1 - t2" in text

    def test_summary_inconsistent(self, parallel_lines):
        text = solve(parallel_lines).summary()
        assert "No solution exists for the system." in text
        assert "Rank: 1" in text

    def test_format_rref(self, coincident_planes):
        assert solve(coincident_planes).format_rref().splitlines() == [
            "1 1 1 | 1",
            "0 0 0 | 0",
        ]


class TestOptions:

    def test_tolerance_override(self):
        eqs = [Line(1.0, 1.0, 1.0), Line(1.0, 1.0 + 1e-8, 1.0)]
        assert solve(eqs, tolerance=1e-6).kind is SolutionKind.INFINITE
        assert solve(eqs, tolerance='strict').kind is SolutionKind.UNIQUE

    def test_tolerance_recorded_on_design(self, unique_lines):
        result = solve(unique_lines, tolerance='relaxed')
        assert result.design.tolerance == 1e-6
        assert result.info['tolerance'] == 1e-6

    def test_equation_tolerance_used(self):
        eqs = [Line(1.0, 1.0, 1.0, tolerance=1e-6), Line(1.0, 1.0 + 1e-8, 1.0, tolerance=1e-6)]
        result = solve(eqs)
        assert result.design.tolerance == 1e-6
        assert result.is_infinite

    def test_mixed_equation_tolerances_need_override(self):
        eqs = [Line(1.0, 1.0, 1.0, tolerance=1e-6), Line(1.0, 1.0 + 1e-8, 1.0)]
        with pytest.raises(ValidationError, match="Inconsistent equation tolerances"):
            solve(eqs)
        assert solve(eqs, tolerance=1e-6).is_infinite

    def test_cpu_backend(self, unique_lines):
        assert solve(unique_lines, backend='cpu').is_unique

    def test_unknown_backend(self, unique_lines):
        with pytest.raises(ValidationError, match="Unknown backend"):
            solve(unique_lines, backend='gpu')

    def test_unknown_tolerance_tier(self, unique_lines):
        with pytest.raises(ValidationError, match="Unknown tolerance tier"):
            solve(unique_lines, tolerance='loose')

    def test_design_input(self):
        design = SystemDesign.from_arrays([[1, 1], [1, -1]], [3, 1])
        result = solve(design)
        assert result.design is design
        np.testing.assert_allclose(result.solution.to_array(), [2, 1])

    def test_design_input_with_tolerance(self):
        design = SystemDesign.from_arrays([[1.0, 1.0], [1.0, 1.0 + 1e-8]], [1.0, 1.0])
        result = solve(design, tolerance=1e-6)
        assert result.design.tolerance == 1e-6
        assert result.is_infinite


class TestInputErrors:

    def test_empty(self):
        with pytest.raises(DegenerateInputError):
            solve([])

    def test_mixed_dimensions(self):
        with pytest.raises(DimensionError):
            solve([Line(1, 1, 1), Plane(1, 1, 1, 1)])

    def test_single_equation_not_wrapped(self):
        with pytest.raises(ValidationError, match="single equation"):
            solve(Line(1, 1, 1))

    def test_not_equations(self):
        with pytest.raises(ValidationError, match="expected LinearEquation"):
            solve([[1, 1, 1]])


class TestWarnings:

    def test_small_pivot_warns(self):
        eqs = [Line(1e-7, 1.0, 1.0), Line(1.0, 1.0, 2.0)]
        with pytest.warns(RuntimeWarning, match="close to tolerance"):
            result = solve(eqs)
        assert result.is_unique
        assert len(result.warnings) == 1

    def test_no_warning_for_plain_system(self, unique_lines):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = solve(unique_lines)
        assert result.warnings == ()

    def test_warning_in_summary(self):
        eqs = [Line(1e-7, 1.0, 1.0), Line(1.0, 1.0, 2.0)]
        with pytest.warns(RuntimeWarning):
            result = solve(eqs)
        assert "Warning: pivot for v1" in result.summary()


class TestProperties:

    def test_unique_matches_numpy(self, random_square):
        A, b, x = random_square
        result = solve(SystemDesign.from_arrays(A, b))
        assert result.is_unique
        np.testing.assert_allclose(result.solution.to_array(), np.linalg.solve(A, b), atol=1e-10)

    def test_unique_solution_satisfies_system(self, random_square):
        A, b, _ = random_square
        result = solve(SystemDesign.from_arrays(A, b))
        assert result.design.is_satisfied_by(result.solution)

    def test_parametrization_spans_null_space(self, random_underdetermined):
        A, b = random_underdetermined
        result = solve(SystemDesign.from_arrays(A, b))
        assert result.is_infinite

        p = result.parametrization
        assert p.n_parameters == 5 - np.linalg.matrix_rank(A)
        directions = np.column_stack([v.to_array() for v in p.direction_vectors])
        np.testing.assert_allclose(A @ directions, 0.0, atol=1e-8)

        reference = null_space(A)
        assert reference.shape[1] == directions.shape[1]
        # Same span: projecting onto the reference basis loses nothing
        projected = reference @ (reference.T @ directions)
        np.testing.assert_allclose(projected, directions, atol=1e-8)

    def test_parametrized_points_satisfy_system(self, random_underdetermined, rng):
        A, b = random_underdetermined
        p = solve(SystemDesign.from_arrays(A, b)).parametrization
        for _ in range(5):
            params = rng.standard_normal(p.n_parameters)
            x = p.point(*params).to_array()
            np.testing.assert_allclose(A @ x, b, atol=1e-8)

    def test_base_point_zero_on_free_variables(self, random_underdetermined):
        A, b = random_underdetermined
        p = solve(SystemDesign.from_arrays(A, b)).parametrization
        base = p.base_point.to_array()
        for free in p.free_variables:
            assert base[free - 1] == 0.0

    def test_direction_unit_on_own_variable(self, random_underdetermined):
        A, b = random_underdetermined
        p = solve(SystemDesign.from_arrays(A, b)).parametrization
        for direction, free in zip(p.direction_vectors, p.free_variables):
            d = direction.to_array()
            assert d[free - 1] == 1.0
            for other in p.free_variables:
                if other != free:
                    assert d[other - 1] == 0.0

    def test_sub_tolerance_column_with_small_pivot(self):
        result = solve(SystemDesign.from_arrays([[5e-10, 2e-6], [0.0, 1.0]], [0.0, 1.0]))
        assert result.kind is SolutionKind.INCONSISTENT
        assert result.parametrization is None

    def test_inconsistent_random(self, random_inconsistent):
        A, b = random_inconsistent
        assert solve(SystemDesign.from_arrays(A, b)).kind is SolutionKind.INCONSISTENT

    def test_returns_system_solution(self, unique_lines):
        assert isinstance(solve(unique_lines), SystemSolution)


class TestBackend:

    def test_cpu_backend_satisfies_protocol(self):
        from pylinalg.core import Backend
        from pylinalg.systems.backends import CPUGaussJordanBackend
        assert isinstance(CPUGaussJordanBackend(), Backend)

    def test_backend_returns_result(self, unique_lines):
        from pylinalg.core import Result
        from pylinalg.systems.backends import CPUGaussJordanBackend
        result = CPUGaussJordanBackend().solve(SystemDesign.from_equations(unique_lines))
        assert isinstance(result, Result)
        assert result.params.kind is SolutionKind.UNIQUE
        assert result.backend_name == 'cpu_gauss_jordan'
