"""
Tests for in-place Gauss-Jordan elimination.

Validates:
    - Solutions match scipy.linalg.solve on random nonsingular systems
    - The coefficient matrix ends as the identity
    - Pivot policies: zero (or below-tolerance) leading pivot solved by
      'partial' and 'on_zero', rejected by 'none'
    - Singular systems raise SingularMatrixError with rank information
    - Exact solutions over rationals
    - Argument validation (aliasing, shapes, policy names)
"""

from fractions import Fraction

import numpy as np
import pytest
from scipy import linalg

from pymatrix.core.compute import tolerances
from pymatrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.matrix import FLOAT32, RATIONAL, Matrix, identity, solve

TOL = tolerances.FLOAT64


def _rational(rows):
    return Matrix.from_rows([[Fraction(v) for v in row] for row in rows])


# ═══════════════════════════════════════════════════════════════════════
# Correctness
# ═══════════════════════════════════════════════════════════════════════


class TestSolveCorrectness:

    def test_matches_scipy(self, random_system):
        M, B = random_system
        m, rhs = Matrix.from_array(M), Matrix.from_array(B)
        solve(m, rhs)
        np.testing.assert_allclose(rhs.to_array(), linalg.solve(M, B), rtol=TOL.rtol, atol=TOL.atol)

    @pytest.mark.parametrize("pivoting", ['partial', 'on_zero', 'none'])
    def test_all_policies_on_dominant_system(self, random_system, pivoting):
        M, B = random_system
        m, rhs = Matrix.from_array(M), Matrix.from_array(B)
        solve(m, rhs, pivoting=pivoting)
        np.testing.assert_allclose(rhs.to_array(), linalg.solve(M, B), rtol=TOL.rtol, atol=TOL.atol)

    def test_coefficient_matrix_becomes_identity(self, random_system):
        M, B = random_system
        m, rhs = Matrix.from_array(M), Matrix.from_array(B)
        solve(m, rhs)
        np.testing.assert_allclose(m.to_array(), np.eye(5), atol=1e-12)
        for r in range(5):
            assert m.get(r, r) == 1.0

    def test_residual_small(self, random_system):
        M, B = random_system
        m, rhs = Matrix.from_array(M), Matrix.from_array(B)
        solve(m, rhs)
        X = rhs.to_array()
        np.testing.assert_allclose(M @ X, B, rtol=TOL.rtol, atol=TOL.atol)

    def test_identity_leaves_rhs(self):
        rhs = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        expected = rhs.copy()
        elim = solve(identity(2), rhs)
        assert rhs == expected
        assert elim.swaps == ()

    def test_rational_exact(self):
        m = _rational([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
        rhs = _rational([[8], [-11], [-3]])
        solve(m, rhs)
        assert rhs.data == (Fraction(2), Fraction(3), Fraction(-1))
        assert m == identity(3, RATIONAL)

    def test_rational_fractional_solution(self):
        m = _rational([[3, 0], [0, 7]])
        rhs = _rational([[1], [2]])
        solve(m, rhs, ring=RATIONAL)
        assert rhs.data == (Fraction(1, 3), Fraction(2, 7))

    def test_float32_stays_single(self):
        m = Matrix.from_array(np.array([[4.0, 1.0], [1.0, 3.0]], dtype=np.float32))
        rhs = Matrix.from_array(np.array([1.0, 2.0], dtype=np.float32))
        solve(m, rhs, ring=FLOAT32)
        assert all(isinstance(v, np.float32) for v in rhs.data)
        np.testing.assert_allclose(rhs.to_array().ravel(), [1 / 11, 7 / 11], rtol=tolerances.FLOAT32.rtol)

    def test_empty_system(self):
        m, rhs = Matrix(0, []), Matrix(0, [])
        elim = solve(m, rhs)
        assert elim.pivots == ()
        assert elim.pivot_ratio is None


# ═══════════════════════════════════════════════════════════════════════
# Pivoting
# ═══════════════════════════════════════════════════════════════════════


class TestPivoting:

    @staticmethod
    def _zero_leading():
        return Matrix.from_rows([[0.0, 1.0], [2.0, 3.0]]), Matrix.column([1.0, 8.0])

    @pytest.mark.parametrize("pivoting", ['partial', 'on_zero'])
    def test_zero_leading_pivot_solved(self, pivoting):
        m, rhs = self._zero_leading()
        elim = solve(m, rhs, pivoting=pivoting)
        np.testing.assert_allclose(rhs.to_array().ravel(), [2.5, 1.0])
        assert elim.swaps == ((0, 1),)

    def test_zero_leading_pivot_rejected_without_pivoting(self):
        m, rhs = self._zero_leading()
        with pytest.raises(SingularMatrixError) as exc_info:
            solve(m, rhs, pivoting='none')
        assert exc_info.value.column == 0

    def test_partial_picks_largest(self):
        m = Matrix.from_rows([[1.0, 2.0], [5.0, 1.0]])
        rhs = Matrix.column([4.0, 7.0])
        elim = solve(m, rhs, pivoting='partial')
        assert elim.swaps == ((0, 1),)
        np.testing.assert_allclose(rhs.to_array().ravel(), [10 / 9, 13 / 9])

    def test_on_zero_keeps_nonzero_pivot(self):
        m = Matrix.from_rows([[1.0, 2.0], [5.0, 1.0]])
        rhs = Matrix.column([4.0, 7.0])
        elim = solve(m, rhs, pivoting='on_zero')
        assert elim.swaps == ()

    def test_on_zero_swaps_pivot_below_tolerance(self):
        # Nonzero leading pivot, but under tol; determinant is -1
        m = Matrix.from_rows([[1e-14, 1.0], [1.0, 1.0]])
        rhs = Matrix.column([1.0, 2.0])
        elim = solve(m, rhs, pivoting='on_zero', tol=1e-12)
        assert elim.swaps == ((0, 1),)
        np.testing.assert_allclose(rhs.to_array().ravel(), [1.0, 1.0])

    def test_none_rejects_pivot_below_tolerance(self):
        m = Matrix.from_rows([[1e-14, 1.0], [1.0, 1.0]])
        rhs = Matrix.column([1.0, 2.0])
        with pytest.raises(SingularMatrixError) as exc_info:
            solve(m, rhs, pivoting='none', tol=1e-12)
        assert exc_info.value.rank == 0

    def test_partial_skips_candidates_below_tolerance(self):
        # Every candidate in column 0 is under tol
        m = Matrix.from_rows([[1e-14, 1.0], [-2e-14, 1.0]])
        rhs = Matrix.column([1.0, 2.0])
        with pytest.raises(SingularMatrixError, match="column 0"):
            solve(m, rhs, tol=1e-12)

    def test_pivot_record(self):
        m = Matrix.from_rows([[4.0, 0.0], [0.0, 0.5]])
        rhs = Matrix.column([1.0, 1.0])
        elim = solve(m, rhs)
        assert elim.pivots == (4.0, 0.5)
        assert elim.min_pivot == 0.5
        assert elim.max_pivot == 4.0
        assert elim.pivot_ratio == pytest.approx(0.125)
        assert elim.pivoting == 'partial'

    def test_unknown_policy(self):
        m, rhs = self._zero_leading()
        with pytest.raises(ValidationError, match="unknown pivoting policy"):
            solve(m, rhs, pivoting='complete')


# ═══════════════════════════════════════════════════════════════════════
# Singular systems
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_zero_row(self):
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [4.0, 5.0, 6.0]])
        rhs = Matrix.column([1.0, 2.0, 3.0])
        with pytest.raises(SingularMatrixError) as exc_info:
            solve(m, rhs)
        err = exc_info.value
        assert err.expected_rank == 3
        assert err.rank == 2

    def test_rank_deficient_rational(self):
        m = _rational([[1, 2], [2, 4]])
        rhs = _rational([[1], [2]])
        with pytest.raises(SingularMatrixError, match="column 1"):
            solve(m, rhs)

    def test_tolerance_rejects_tiny_pivot(self):
        m = Matrix.from_rows([[1.0, 0.0], [0.0, 1e-14]])
        rhs = Matrix.column([1.0, 1.0])
        with pytest.raises(SingularMatrixError):
            solve(m, rhs, tol=1e-12)

    def test_tiny_pivot_accepted_without_tolerance(self):
        m = Matrix.from_rows([[1.0, 0.0], [0.0, 1e-14]])
        rhs = Matrix.column([1.0, 1.0])
        solve(m, rhs)
        assert rhs.get(1, 0) == pytest.approx(1e14)

    def test_matrix_name_in_error(self):
        m = Matrix.filled(2, 2, 0.0)
        rhs = Matrix.column([0.0, 0.0])
        with pytest.raises(SingularMatrixError, match="normal matrix") as exc_info:
            solve(m, rhs, name="normal matrix")
        assert exc_info.value.matrix_name == "normal matrix"


# ═══════════════════════════════════════════════════════════════════════
# Argument validation
# ═══════════════════════════════════════════════════════════════════════


class TestSolveValidation:

    def test_aliased_arguments(self):
        m = identity(2)
        with pytest.raises(ValidationError, match="distinct"):
            solve(m, m)

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            solve(Matrix.filled(2, 3, 1.0), Matrix.column([1.0, 1.0]))

    def test_rhs_height(self):
        with pytest.raises(DimensionError, match="right-hand side"):
            solve(identity(3), Matrix.column([1.0, 1.0]))

    def test_inputs_untouched_on_shape_error(self):
        m = Matrix.filled(2, 3, 1.0)
        rhs = Matrix.column([1.0, 1.0])
        with pytest.raises(DimensionError):
            solve(m, rhs)
        assert m.data == (1.0,) * 6
        assert rhs.data == (1.0, 1.0)
