"""
PyMatrix: generic dense matrices with Gauss-Jordan elimination.

Matrices work over any scalar type; algebra and solving go through a Ring
(float64, float32, exact rationals, or your own). On top of the core sits
least-squares curve fitting through the normal equations.

Submodules:
    core: Exceptions, protocols, result envelope, validation, timing
    matrix: Matrix type, rings, algebra, Gauss-Jordan solver
    fitting: Basis sets, fit(), FitSession
"""

__version__ = "0.1.0"

from pymatrix.matrix import (
    Matrix,
    FLOAT64,
    FLOAT32,
    RATIONAL,
    add,
    matmul,
    identity,
    solve,
)
from pymatrix.fitting import fit, FitSession, polynomial, sinusoids
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Matrix",
    "FLOAT64",
    "FLOAT32",
    "RATIONAL",
    "add",
    "matmul",
    "identity",
    "solve",
    "fit",
    "FitSession",
    "polynomial",
    "sinusoids",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "SingularMatrixError",
]
