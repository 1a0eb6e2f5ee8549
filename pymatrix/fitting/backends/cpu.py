"""
CPU backend for least-squares fitting.

Forms the normal equations A'A c = A'v with the generic Matrix type and
solves them in place by Gauss-Jordan elimination over the chosen ring.
"""

from typing import Any, Literal
import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import CONDITION_THRESHOLD, select_tolerance
from pymatrix.core.protocols import Ring
from pymatrix.core.result import Result
from pymatrix.fitting.design import FitDesign
from pymatrix.fitting.solution import ILL_CONDITIONED, FitParams
from pymatrix.matrix.dense import Matrix
from pymatrix.matrix.gauss_jordan import PivotPolicy, solve
from pymatrix.matrix.scalars import FLOAT64


class GaussJordanBackend:
    """
    CPU backend using the normal equations and Gauss-Jordan elimination.

    Implements the Backend protocol for FitDesign -> FitParams.

    Args:
        ring: Scalar ring the matrices are built and solved in
        pivoting: Row interchange policy passed to solve()
        tol: Singular-pivot tolerance. 'auto' scales the ring's epsilon by
            the system size and the largest entry of A'A (exact zero for
            the rational ring); None accepts any nonzero pivot.
    """

    def __init__(
        self,
        ring: Ring = FLOAT64,
        pivoting: PivotPolicy = 'partial',
        tol: float | Literal['auto'] | None = 'auto',
    ):
        self._ring = ring
        self._pivoting = pivoting
        self._tol = tol

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    @property
    def ring(self) -> Ring:
        return self._ring

    def _resolve_tol(self, lhs: Matrix) -> float | None:
        if self._tol != 'auto':
            return self._tol
        eps = select_tolerance(self._ring.name).pivot_eps
        if eps == 0.0:
            return None
        largest = max((self._ring.magnitude(e) for e in lhs.data), default=0.0)
        return lhs.height * eps * largest

    def solve(self, design: FitDesign) -> Result[FitParams]:
        """
        Fit by solving the normal equations.

        Algorithm:
            1. Form A'A and A'v in the ring
            2. Gauss-Jordan: A'A -> I, A'v -> coefficients
            3. Residuals and summary statistics in float64

        Raises:
            SingularMatrixError: If A'A has no unique solution
        """
        timer = Timer()
        timer.start()
        ring = self._ring

        with timer.section('normal_equations'):
            lhs, rhs = design.normal_equations(ring)

        tol = self._resolve_tol(lhs)

        with timer.section('solve'):
            elimination = solve(
                lhs, rhs,
                ring=ring,
                pivoting=self._pivoting,
                tol=tol,
                name="A'A",
            )

        with timer.section('residuals'):
            coefficients = rhs.to_array(np.float64).ravel()
            fitted_values = design.basis_values() @ coefficients
            residuals = design.y - fitted_values
            rss = float(residuals @ residuals)
            tss = float(np.sum((design.y - np.mean(design.y)) ** 2))

        timer.stop()

        warnings: list[str] = []
        ratio = elimination.pivot_ratio
        ill_conditioned = ratio is not None and ratio < 1.0 / CONDITION_THRESHOLD
        if ill_conditioned:
            warnings.append(
                f"{ILL_CONDITIONED}: pivot ratio {ratio:.3g} "
                f"below {1.0 / CONDITION_THRESHOLD:.0e}"
            )

        # Accuracy the coefficients can be expected to meet
        tier = select_tolerance(ring.name, is_ill_conditioned=ill_conditioned)

        params = FitParams(
            coefficients=coefficients,
            coefficient_matrix=lhs,
            solution_matrix=rhs,
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'ring': ring.name,
            'pivoting': self._pivoting,
            'swaps': len(elimination.swaps),
            'tol': tol,
            'min_pivot': elimination.min_pivot,
            'pivot_ratio': ratio,
            'tolerance_tier': tier.name,
            'expected_rtol': tier.rtol,
            'expected_atol': tier.atol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
