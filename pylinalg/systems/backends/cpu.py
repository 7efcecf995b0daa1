"""
CPU reference backend for linear systems.

Runs Gauss-Jordan elimination on NumPy arrays: triangular pass, reduced
row-echelon pass, classification and, for infinite solution sets,
parametrization.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.systems.design import SystemDesign
from pylinalg.systems.solution import SystemParams
from pylinalg.systems._elimination import EliminationEngine


class CPUGaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Implements the Backend protocol for SystemDesign -> SystemParams.
    Stateless: a fresh EliminationEngine is built for every solve.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: SystemDesign) -> Result[SystemParams]:
        """
        Solve A x = b by reduction to reduced row-echelon form.

        Args:
            design: Validated system design

        Returns:
            Result containing SystemParams

        Raises:
            InvariantViolationError: If the elimination invariants break
        """
        timer = Timer()
        timer.start()

        report = EliminationEngine(design).solve(timer)

        timer.stop()

        warnings_list: list[str] = []
        for row, variable, value in report.small_pivots:
            warnings_list.append(
                f"pivot for v{variable + 1} (row {row}) has magnitude {abs(value):.3g}, "
                f"close to tolerance {design.tolerance:g}; "
                f"classification may depend on the tolerance"
            )

        params = SystemParams(
            kind=report.kind,
            rref=report.matrix,
            offsets=report.offsets,
            pivots=report.pivots,
            rank=report.rank,
            solution=report.solution,
            parametrization=report.parametrization,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'kind': report.kind.value,
            'rank': report.rank,
            'pivots': list(report.pivots),
            'n_equations': design.n_equations,
            'dimensions': design.dimensions,
            'n_free': design.dimensions - report.rank,
            'tolerance': design.tolerance,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
