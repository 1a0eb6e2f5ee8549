"""
Matrix algebra over a Ring: addition, multiplication, identity.

Shape mismatches are caller bugs. They raise DimensionError before any
element is touched, so there is never a partial result.
"""

from __future__ import annotations

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.protocols import Ring
from pymatrix.matrix.dense import Matrix
from pymatrix.matrix.scalars import FLOAT64, ring_of


def resolve_ring(ring: Ring | None, *matrices: Matrix) -> Ring:
    """Use ring if given, else infer it from the first element found."""
    if ring is not None:
        return ring
    for m in matrices:
        if m.width and m.height:
            return ring_of(m.get(0, 0))
    return FLOAT64


def add(a: Matrix, b: Matrix, ring: Ring | None = None) -> Matrix:
    """
    Element-wise sum.

    Raises:
        DimensionError: If a and b differ in width or height
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"add: shapes differ, {a.height}x{a.width} vs {b.height}x{b.width}",
            expected=a.shape,
            actual=b.shape,
        )
    ring = resolve_ring(ring, a, b)
    return Matrix(a.width, [ring.add(x, y) for x, y in zip(a.data, b.data)])


def matmul(a: Matrix, b: Matrix, ring: Ring | None = None) -> Matrix:
    """
    Matrix product a @ b.

    Cell (i, j) accumulates a(i, k) * b(k, j) from ring.zero in increasing k.

    Raises:
        DimensionError: If a.width != b.height
    """
    if a.width != b.height:
        raise DimensionError(
            f"matmul: inner dimensions differ, {a.height}x{a.width} @ {b.height}x{b.width}",
            expected=(a.width, b.width),
            actual=b.shape,
        )
    ring = resolve_ring(ring, a, b)
    n = a.width
    a_rows = [list(r) for r in a.rows()]
    b_cols = b.cols()

    def cell(i: int, j: int):
        acc = ring.zero
        row, col = a_rows[i], b_cols[j]
        for k in range(n):
            acc = ring.add(acc, ring.mul(row[k], col[k]))
        return acc

    return Matrix.by_pos(a.height, b.width, cell)


def identity(size: int, ring: Ring | None = None) -> Matrix:
    """size x size matrix with ring.one on the diagonal, ring.zero elsewhere."""
    ring = ring or FLOAT64
    return Matrix.by_pos(size, size, lambda y, x: ring.one if x == y else ring.zero)


__all__ = ['add', 'matmul', 'identity', 'resolve_ring']
