"""
Fit Design.

Design wraps validated sample points and a basis set, and builds the
matrices the solver needs: the design matrix A (one row per sample, one
column per basis function), the response column v, and the normal
equations A'A, A'v.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.protocols import Ring
from pymatrix.core.validation import (
    check_array,
    check_columns,
    check_finite,
    check_min_samples,
)
from pymatrix.fitting.basis import BasisSet
from pymatrix.matrix.algebra import matmul
from pymatrix.matrix.dense import Matrix


@dataclass(frozen=True)
class FitDesign:
    """
    Least-squares design specification.

    Immutable after construction. Build with FitDesign.from_points().
    """
    _points: NDArray[np.floating[Any]]
    _basis: BasisSet
    _n: int
    _p: int

    @classmethod
    def from_points(
        cls,
        points: ArrayLike,
        basis: BasisSet | Iterable[Callable[[Any], Any]],
    ) -> FitDesign:
        """
        Build a design from (x, y) sample points.

        Args:
            points: Array-like of shape (n, 2)
            basis: BasisSet, or plain callables wrapped into one

        Raises:
            ValidationError: If points are non-numeric or non-finite, or
                there are fewer points than basis functions
            DimensionError: If points is not (n, 2)
        """
        if not isinstance(basis, BasisSet):
            basis = BasisSet.from_callables(basis)

        pts = check_array(points, 'points')
        if pts.size == 0:
            pts = pts.reshape(0, 2)
        pts = pts.astype(np.float64, copy=False)
        check_columns(pts, 2, 'points')
        check_finite(pts, 'points')

        p = len(basis)
        # Fewer samples than unknowns can never give a unique solution
        check_min_samples(pts, p, 'points')

        return cls(_points=pts, _basis=basis, _n=pts.shape[0], _p=p)

    # === Properties ===

    @property
    def points(self) -> NDArray[np.floating[Any]]:
        """Sample points (n x 2)."""
        return self._points

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._points[:, 0]

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._points[:, 1]

    @property
    def basis(self) -> BasisSet:
        return self._basis

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n

    @property
    def p(self) -> int:
        """Number of basis functions."""
        return self._p

    def basis_values(self) -> NDArray[np.floating[Any]]:
        """Design matrix as a float64 array (n x p), evaluated vectorized."""
        x = self.x
        return np.column_stack([
            np.broadcast_to(np.asarray(f(x), dtype=np.float64), x.shape)
            for f in self._basis
        ])

    # === Matrices ===

    def design_matrix(self, ring: Ring) -> Matrix:
        """A with A[i][j] = basis_j(x_i), coerced into ring."""
        x, basis = self.x, self._basis
        return Matrix.by_pos(self._n, self._p, lambda i, j: ring.coerce(basis[j](x[i])))

    def response(self, ring: Ring) -> Matrix:
        """Column vector of sample y-values."""
        return Matrix.column(ring.coerce(v) for v in self.y)

    def normal_equations(self, ring: Ring) -> tuple[Matrix, Matrix]:
        """
        Fresh (A'A, A'v) for this design.

        Both matrices are new objects, safe to hand to solve().
        """
        A = self.design_matrix(ring)
        At = A.transpose()
        return matmul(At, A, ring), matmul(At, self.response(ring), ring)
