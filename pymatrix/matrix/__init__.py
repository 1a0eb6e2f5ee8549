"""
Generic dense matrices and Gauss-Jordan elimination.

Layers, each depending only on the ones before it:
    scalars: Ring implementations (float64, float32, rational)
    dense: Matrix storage, construction, access, transforms
    render: Aligned text rendering
    algebra: add, matmul, identity
    gauss_jordan: In-place linear solver

Example:
    >>> from pymatrix.matrix import Matrix, solve
    >>> m = Matrix.from_rows([[2.0, 1.0], [1.0, 3.0]])
    >>> b = Matrix.column([3.0, 5.0])
    >>> _ = solve(m, b)        # m is now the identity, b the solution
    >>> [round(float(v), 6) for v in b.data]
    [0.8, 1.4]
"""

from pymatrix.matrix.scalars import (
    FloatRing,
    RationalRing,
    FLOAT64,
    FLOAT32,
    RATIONAL,
    get_ring,
    ring_of,
)
from pymatrix.matrix.dense import Matrix, RowView
from pymatrix.matrix.render import render
from pymatrix.matrix.algebra import add, matmul, identity
from pymatrix.matrix.gauss_jordan import solve, Elimination, PivotPolicy

__all__ = [
    # Rings
    "FloatRing",
    "RationalRing",
    "FLOAT64",
    "FLOAT32",
    "RATIONAL",
    "get_ring",
    "ring_of",
    # Matrix
    "Matrix",
    "RowView",
    "render",
    # Algebra
    "add",
    "matmul",
    "identity",
    # Solver
    "solve",
    "Elimination",
    "PivotPolicy",
]
