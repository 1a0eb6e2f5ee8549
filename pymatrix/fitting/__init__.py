"""
Least-squares curve fitting on top of the matrix core.

Public API:
    fit(points, basis, ...) -> FitSolution
    FitSession: point collection and per-frame refitting for interactive use

fit() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pymatrix.fitting import fit, polynomial
    >>> result = fit(points, polynomial(2))
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pymatrix.fitting.basis import BasisFunction, BasisSet, polynomial, sinusoids
from pymatrix.fitting.design import FitDesign
from pymatrix.fitting.solution import FitSolution, FitParams
from pymatrix.fitting.solvers import fit
from pymatrix.fitting.session import FitSession

__all__ = [
    "fit",
    "FitSession",
    "FitDesign",
    "FitSolution",
    "FitParams",
    "BasisFunction",
    "BasisSet",
    "polynomial",
    "sinusoids",
]
