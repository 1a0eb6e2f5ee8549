"""
Solver dispatch for least-squares fitting.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Any, Callable, Iterable, Literal
from numpy.typing import ArrayLike

from pymatrix.core.protocols import Ring
from pymatrix.fitting.basis import BasisSet
from pymatrix.fitting.design import FitDesign
from pymatrix.fitting.solution import FitSolution
from pymatrix.fitting.backends.cpu import GaussJordanBackend
from pymatrix.matrix.gauss_jordan import PivotPolicy
from pymatrix.matrix.scalars import get_ring


# Type alias for ring selection
RingChoice = Literal['float64', 'float32', 'rational']


def fit(
    points: ArrayLike,
    basis: BasisSet | Iterable[Callable[[Any], Any]],
    *,
    ring: RingChoice | Ring = 'float64',
    pivoting: PivotPolicy = 'partial',
    tol: float | Literal['auto'] | None = 'auto',
) -> FitSolution:
    """
    Fit a linear combination of basis functions to sample points.

    Solves the least-squares problem
        min_c ||v - A c||²
    through the normal equations (A'A) c = A'v, where A[i][j] is basis
    function j at sample i's x-coordinate and v holds the y-coordinates.

    Args:
        points: Sample points, array-like of shape (n, 2) holding (x, y)
        basis: BasisSet, or plain callables of x
        ring: Scalar ring for the elimination:
            - 'float64': double precision (default)
            - 'float32': single precision
            - 'rational': exact fractions (slow, no rounding at all)
            - or any object implementing the Ring protocol
        pivoting: 'partial' (default), 'on_zero' or 'none'
        tol: Singular-pivot tolerance; see GaussJordanBackend

    Returns:
        FitSolution with coefficients, residuals, curve evaluation and summary

    Raises:
        ValidationError: If points are invalid or fewer than the basis size
        DimensionError: If points is not (n, 2)
        SingularMatrixError: If the normal equations have no unique solution

    Example:
        >>> import numpy as np
        >>> from pymatrix.fitting import fit, polynomial
        >>> result = fit([(0, 1), (1, 2), (2, 5), (3, 10)], polynomial(2))
        >>> np.allclose(result.coefficients, [1.0, 0.0, 1.0])
        True
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = FitDesign.from_points(points, basis)

    # === Select Backend ===
    backend_impl = _get_backend(ring, pivoting, tol)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return FitSolution(_result=result, _design=design)


def _get_backend(
    ring: RingChoice | Ring,
    pivoting: PivotPolicy,
    tol: float | Literal['auto'] | None,
) -> GaussJordanBackend:
    """
    Instantiate the backend for the requested ring.

    Raises:
        ValueError: If ring is an unknown name
    """
    return GaussJordanBackend(ring=get_ring(ring), pivoting=pivoting, tol=tol)
