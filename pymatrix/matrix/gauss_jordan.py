"""
In-place Gauss-Jordan elimination.

solve(m, rhs) reduces the square coefficient matrix m to the identity and
applies the same row operations to rhs, so that afterwards rhs holds X in
the original system m @ X = rhs. Both arguments are mutated; they must be
distinct objects.

Algorithm:
    Forward pass, r = 0..n-1:
        1. Pick the pivot row for column r (per pivoting policy) and swap
           it into place in both matrices
        2. Scale row r of both matrices by the pivot's inverse
        3. Clear column r below the diagonal
    Backward pass, r = n-1..0:
        4. Clear column r above the diagonal

A pivot that is zero (or no larger than tol) after the policy has had its
say raises SingularMatrixError. The matrices are left partially reduced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pymatrix.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pymatrix.core.protocols import Ring
from pymatrix.matrix.algebra import resolve_ring
from pymatrix.matrix.dense import Matrix


PivotPolicy = Literal['partial', 'on_zero', 'none']

PIVOT_POLICIES: frozenset[str] = frozenset({'partial', 'on_zero', 'none'})


@dataclass(frozen=True)
class Elimination:
    """
    Record of one completed elimination.

    Attributes:
        pivots: Magnitude of each pivot, in column order, before scaling
        swaps: Row interchanges (r, chosen_row) in the order applied
        pivoting: Policy that was used
    """
    pivots: tuple[float, ...]
    swaps: tuple[tuple[int, int], ...]
    pivoting: str

    @property
    def min_pivot(self) -> float | None:
        return min(self.pivots) if self.pivots else None

    @property
    def max_pivot(self) -> float | None:
        return max(self.pivots) if self.pivots else None

    @property
    def pivot_ratio(self) -> float | None:
        """
        Smallest over largest pivot magnitude.

        A cheap conditioning indicator: values near machine epsilon mean the
        solution is dominated by rounding error.
        """
        if not self.pivots:
            return None
        return self.min_pivot / self.max_pivot


def _negligible(ring: Ring, a, tol: float | None) -> bool:
    """True when a cannot serve as a pivot: zero, or no larger than tol."""
    return ring.is_zero(a) or (tol is not None and ring.magnitude(a) <= tol)


def _choose_pivot_row(m: Matrix, r: int, ring: Ring, pivoting: str, tol: float | None) -> int:
    if pivoting == 'none':
        return r
    if pivoting == 'on_zero' and not _negligible(ring, m.get(r, r), tol):
        return r

    start = r if pivoting == 'partial' else r + 1
    best = max(
        range(start, m.height),
        key=lambda i: ring.magnitude(m.get(i, r)),
        default=r,
    )
    if _negligible(ring, m.get(best, r), tol):
        return r
    return best


def _eliminate(m: Matrix, rhs: Matrix, r: int, r2: int, ring: Ring) -> None:
    """Clear m[r2][r] using the (already unit) pivot row r."""
    factor = ring.neg(m.get(r2, r))
    if ring.is_zero(factor):
        return
    m.add_scaled_row(r, r2, factor, ring)
    rhs.add_scaled_row(r, r2, factor, ring)


def solve(
    m: Matrix,
    rhs: Matrix,
    *,
    ring: Ring | None = None,
    pivoting: PivotPolicy = 'partial',
    tol: float | None = None,
    name: str = 'coefficient matrix',
) -> Elimination:
    """
    Solve m @ X = rhs in place. Mutates both arguments; do not alias them.

    Args:
        m: Square n x n coefficient matrix; reduced to the identity
        rhs: n x k right-hand side; replaced by the solution X
        ring: Scalar ring; inferred from m's elements when omitted
        pivoting: Row interchange policy:
            - 'partial': each column takes the largest-magnitude candidate
              at or below the diagonal
            - 'on_zero': swap only when the diagonal pivot is zero (or
              no larger than tol)
            - 'none': never swap
        tol: Pivots with magnitude <= tol count as zero. None means only
            exact zeros do.
        name: Matrix name used in SingularMatrixError

    Returns:
        Elimination describing pivots and swaps

    Raises:
        ValidationError: If m and rhs are the same object, or the policy is unknown
        DimensionError: If m is not square or rhs has the wrong height
        SingularMatrixError: If a column has no usable pivot
    """
    if m is rhs:
        raise ValidationError(
            "solve: coefficient matrix and right-hand side must be distinct matrices"
        )
    if pivoting not in PIVOT_POLICIES:
        raise ValidationError(
            f"solve: unknown pivoting policy {pivoting!r}, expected one of {sorted(PIVOT_POLICIES)}"
        )
    n = m.height
    if m.width != n:
        raise DimensionError(
            f"solve: {name} must be square, got {m.height}x{m.width}",
            expected=(n, n),
            actual=m.shape,
        )
    if rhs.height != n:
        raise DimensionError(
            f"solve: right-hand side must have {n} rows, got {rhs.height}",
            expected=(n, rhs.width),
            actual=rhs.shape,
        )

    ring = resolve_ring(ring, m)
    pivots: list[float] = []
    swaps: list[tuple[int, int]] = []

    for r in range(n):
        p = _choose_pivot_row(m, r, ring, pivoting, tol)
        if p != r:
            m.swap_rows(r, p)
            rhs.swap_rows(r, p)
            swaps.append((r, p))

        pivot = m.get(r, r)
        size = ring.magnitude(pivot)
        if _negligible(ring, pivot, tol):
            raise SingularMatrixError(
                f"{name} is singular: no usable pivot in column {r} "
                f"(|pivot| = {size:.3g}, tol = {tol}); found {r} of {n} pivots",
                matrix_name=name,
                rank=r,
                expected_rank=n,
                column=r,
            )
        pivots.append(size)

        inverse = ring.inv(pivot)
        m.scale_row(r, inverse, ring)
        rhs.scale_row(r, inverse, ring)
        # pivot * inv(pivot) can miss one by an ulp in floating rings
        m.set(r, r, ring.one)

        for r2 in range(r + 1, n):
            _eliminate(m, rhs, r, r2, ring)

    for r in reversed(range(n)):
        for r2 in range(r):
            _eliminate(m, rhs, r, r2, ring)

    return Elimination(pivots=tuple(pivots), swaps=tuple(swaps), pivoting=pivoting)


__all__ = ['solve', 'Elimination', 'PivotPolicy', 'PIVOT_POLICIES']
