"""
Fit solution types.

Contains the parameter payload and the user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.result import Result
from pymatrix.matrix.dense import Matrix

if TYPE_CHECKING:
    from pymatrix.fitting.design import FitDesign

# Leading text of the backend warning for badly conditioned normal equations
ILL_CONDITIONED = "ill-conditioned normal equations"


@dataclass(frozen=True)
class FitParams:
    """
    Parameter payload for a least-squares fit.

    coefficient_matrix and solution_matrix are the two matrices the solver
    worked on, in their post-solve state: A'A reduced to (ideally) the
    identity, and A'v replaced by the coefficient column.
    """
    coefficients: NDArray[np.floating[Any]]
    coefficient_matrix: Matrix
    solution_matrix: Matrix
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float


@dataclass
class FitSolution:
    """
    User-facing fit results.

    Wraps the backend Result and adds curve evaluation and a text summary.
    """
    _result: Result[FitParams]
    _design: 'FitDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def coefficient_matrix(self) -> Matrix:
        return self._result.params.coefficient_matrix

    @property
    def solution_matrix(self) -> Matrix:
        return self._result.params.solution_matrix

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def design(self) -> 'FitDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def ill_conditioned(self) -> bool:
        """True when the coefficients may carry noticeable rounding error."""
        return self._result.has_warning(ILL_CONDITIONED)

    def evaluate(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Fitted curve sum_i coef_i * basis_i(x).

        Returns a float for scalar x, an array shaped like x otherwise.
        """
        xs = np.asarray(x, dtype=np.float64)
        total = np.zeros_like(xs)
        for f, c in zip(self._design.basis, self.coefficients):
            total = total + c * f(xs)
        if np.ndim(x) == 0:
            return float(total)
        return total

    def sample_curve(
        self,
        start: float = -1000.0,
        stop: float = 1000.0,
        step: float = 1.0,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        (xs, ys) polyline for drawing, xs = arange(start, stop, step).

        The defaults cover the plotting window the interactive front end
        uses.
        """
        xs = np.arange(start, stop, step, dtype=np.float64)
        return xs, self.evaluate(xs)

    def summary(self) -> str:
        """Text summary: fit statistics, coefficients, post-solve matrices."""
        lines = [
            "Least-Squares Fit Results",
            "=" * 60,
            f"Samples: {self._design.n}",
            f"Basis functions: {self._design.p}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual sum of squares: {self.rss:.6g}",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Basis':<16} {'Estimate':>14}",
            "-" * 60,
        ]

        for name, coef in zip(self._design.basis.names, self.coefficients):
            lines.append(f"{name:<16} {coef:14.6f}")

        lines.append("-" * 60)
        lines.append("Solution:")
        lines.append(str(self.solution_matrix))
        lines.append("Coefficient matrix after elimination:")
        lines.append(str(self.coefficient_matrix))
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitSolution(n={self._design.n}, p={self._design.p}, "
            f"r_squared={self.r_squared:.4f})"
        )
