"""
Interactive fitting session.

Holds the state an interactive front end needs between frames: the points
collected so far, the latest solution, and whether it changed since the
previous frame. Drawing, input capture and the event loop stay outside;
a front end calls add_point() on clicks, clear() on its reset key, and
refit() once per frame.

Usage:
    session = FitSession(polynomial(4))
    while running:
        if clicked:
            session.add_point(wx, wy)
        solution = session.refit()
        if session.changed and solution is not None:
            print(solution.coefficients)
        if solution is not None:
            draw_polyline(*solution.sample_curve())
"""

from __future__ import annotations

import math
import warnings
from typing import Literal

from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.core.protocols import Ring
from pymatrix.fitting.basis import BasisSet, polynomial
from pymatrix.fitting.solution import FitSolution
from pymatrix.fitting.solvers import RingChoice, fit
from pymatrix.matrix.dense import Matrix
from pymatrix.matrix.gauss_jordan import PivotPolicy

# Fits run only once the point count exceeds this (or the basis size,
# whichever is larger).
DEFAULT_MIN_POINTS = 10


class FitSession:
    """
    Point collection plus per-frame refitting.

    Args:
        basis: Basis set to fit (degree-4 polynomial by default)
        min_points: Solve only when more than this many points exist.
            Defaults to max(DEFAULT_MIN_POINTS, len(basis)).
        ring, pivoting, tol: Passed through to fit()
    """

    def __init__(
        self,
        basis: BasisSet | None = None,
        *,
        min_points: int | None = None,
        ring: RingChoice | Ring = 'float64',
        pivoting: PivotPolicy = 'partial',
        tol: float | Literal['auto'] | None = 'auto',
    ):
        self._basis = basis if basis is not None else polynomial(4)
        if min_points is None:
            min_points = max(DEFAULT_MIN_POINTS, len(self._basis))
        self._min_points = min_points
        self._ring = ring
        self._pivoting = pivoting
        self._tol = tol
        self._points: list[tuple[float, float]] = []
        self._solution: FitSolution | None = None
        self._last_solution_matrix: Matrix | None = None
        self._changed = False

    @property
    def basis(self) -> BasisSet:
        return self._basis

    @property
    def min_points(self) -> int:
        return self._min_points

    @property
    def points(self) -> tuple[tuple[float, float], ...]:
        return tuple(self._points)

    @property
    def ready(self) -> bool:
        """True when enough points exist to attempt a fit."""
        return len(self._points) > self._min_points

    @property
    def solution(self) -> FitSolution | None:
        """Solution from the latest refit(), None if that frame had none."""
        return self._solution

    @property
    def changed(self) -> bool:
        """Whether the latest refit() produced a different solution than the one before."""
        return self._changed

    def add_point(self, x: float, y: float) -> None:
        """
        Record a sample point.

        Raises:
            ValidationError: If x or y is not a finite number
        """
        try:
            px, py = float(x), float(y)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"add_point: non-numeric point ({x!r}, {y!r})") from e
        if not (math.isfinite(px) and math.isfinite(py)):
            raise ValidationError(f"add_point: non-finite point ({px}, {py})")
        self._points.append((px, py))

    def clear(self) -> None:
        """Drop all points. The next refit() yields no solution."""
        self._points.clear()

    def refit(self) -> FitSolution | None:
        """
        Fit the current points, if there are enough of them.

        A singular or otherwise unusable system does not raise: it is
        reported as a RuntimeWarning and the frame gets no solution, so the
        front end skips drawing the curve and carries on.
        """
        solution = None
        if self.ready:
            try:
                solution = fit(
                    self._points,
                    self._basis,
                    ring=self._ring,
                    pivoting=self._pivoting,
                    tol=self._tol,
                )
            except (SingularMatrixError, ValidationError) as e:
                warnings.warn(
                    f"Fit skipped for {len(self._points)} points: {e}",
                    RuntimeWarning,
                    stacklevel=2,
                )

        current = solution.solution_matrix if solution is not None else None
        self._changed = current != self._last_solution_matrix
        self._last_solution_matrix = current
        self._solution = solution
        return solution

    def curve(
        self,
        start: float = -1000.0,
        stop: float = 1000.0,
        step: float = 1.0,
    ):
        """Polyline of the current solution, or None when there is none."""
        if self._solution is None:
            return None
        return self._solution.sample_curve(start, stop, step)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return (
            f"FitSession(points={len(self._points)}, basis={len(self._basis)}, "
            f"min_points={self._min_points})"
        )
