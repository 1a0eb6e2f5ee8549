"""
Tests for fit() and the Gauss-Jordan backend.

Validates:
    - Exact recovery of polynomial and sinusoidal coefficients
    - Agreement with scipy.linalg.lstsq on noisy data
    - Exact fitting over rationals
    - Singular designs raise SingularMatrixError
    - Result metadata: info, timing, warnings, summary
"""

from fractions import Fraction

import numpy as np
import pytest
from scipy import linalg

from pymatrix.core.compute import tolerances
from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.fitting import FitDesign, fit, polynomial, sinusoids
from pymatrix.fitting.backends import GaussJordanBackend
from pymatrix.matrix import RATIONAL


# ═══════════════════════════════════════════════════════════════════════
# Coefficient recovery
# ═══════════════════════════════════════════════════════════════════════


class TestFitCoefficients:

    def test_quadratic_exact(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2))
        np.testing.assert_allclose(result.coefficients, [1.0, 0.0, 1.0], atol=1e-10)
        assert result.rss == pytest.approx(0.0, abs=1e-18)
        assert result.r_squared == pytest.approx(1.0)

    def test_rational_exact(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2), ring='rational')
        assert result.solution_matrix.data == (Fraction(1), Fraction(0), Fraction(1))
        assert result.info['ring'] == 'rational'
        assert result.info['tol'] is None

    def test_matches_lstsq(self, rng):
        x = np.linspace(-1.0, 1.0, 40)
        y = 0.5 - 2.0 * x + 3.0 * x ** 3 + 0.1 * rng.standard_normal(x.size)
        result = fit(np.column_stack([x, y]), polynomial(3))

        A = np.column_stack([x ** k for k in range(4)])
        expected, *_ = linalg.lstsq(A, y)
        np.testing.assert_allclose(
            result.coefficients, expected,
            rtol=result.info['expected_rtol'], atol=result.info['expected_atol'],
        )
        np.testing.assert_allclose(result.fitted_values, A @ expected, atol=1e-9)
        np.testing.assert_allclose(result.residuals, y - result.fitted_values)

    def test_sinusoids(self):
        x = np.linspace(-50.0, 50.0, 101)
        y = 2.0 + 3.0 * np.sin(x / 5.0) - 1.0 * np.sin(x / 8.0)
        result = fit(np.column_stack([x, y]), sinusoids([5, 6, 7, 8]))
        np.testing.assert_allclose(result.coefficients, [2.0, 3.0, 0.0, 0.0, -1.0], atol=1e-6)

    def test_float32(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2), ring='float32')
        assert all(isinstance(v, np.float32) for v in result.solution_matrix.data)
        np.testing.assert_allclose(result.coefficients, [1.0, 0.0, 1.0], atol=1e-3)

    def test_coefficient_matrix_reduced(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2))
        np.testing.assert_allclose(result.coefficient_matrix.to_array(), np.eye(3), atol=1e-12)

    def test_exactly_determined(self):
        result = fit([(0, 1), (2, 5)], polynomial(1))
        np.testing.assert_allclose(result.coefficients, [1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Failure modes
# ═══════════════════════════════════════════════════════════════════════


class TestFitErrors:

    def test_all_x_equal_is_singular(self):
        points = [(1.0, 0.0), (1.0, 1.0), (1.0, 2.0), (1.0, 3.0)]
        with pytest.raises(SingularMatrixError) as exc_info:
            fit(points, polynomial(2))
        assert exc_info.value.matrix_name == "A'A"
        assert exc_info.value.expected_rank == 3

    def test_all_x_equal_rational(self):
        points = [(1, 0), (1, 1), (1, 2)]
        with pytest.raises(SingularMatrixError):
            fit(points, polynomial(1), ring='rational')

    def test_too_few_points(self):
        with pytest.raises(ValidationError):
            fit([(0, 0)], polynomial(2))

    def test_unknown_ring(self, quadratic_points):
        with pytest.raises(ValueError, match="Unknown ring"):
            fit(quadratic_points, polynomial(2), ring='complex')

    def test_unknown_pivoting(self, quadratic_points):
        with pytest.raises(ValidationError):
            fit(quadratic_points, polynomial(2), pivoting='rook')


# ═══════════════════════════════════════════════════════════════════════
# Evaluation
# ═══════════════════════════════════════════════════════════════════════


class TestEvaluate:

    def test_scalar(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2))
        value = result.evaluate(4.0)
        assert isinstance(value, float)
        assert value == pytest.approx(17.0)

    def test_array(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2))
        np.testing.assert_allclose(result.evaluate([-1.0, 5.0]), [2.0, 26.0])

    def test_sample_curve_default_window(self, quadratic_points):
        xs, ys = fit(quadratic_points, polynomial(2)).sample_curve()
        assert xs.shape == (2000,)
        assert xs[0] == -1000.0
        assert xs[-1] == 999.0
        assert ys[1000] == pytest.approx(1.0)

    def test_sample_curve_custom(self, quadratic_points):
        xs, ys = fit(quadratic_points, polynomial(2)).sample_curve(0.0, 2.0, 0.5)
        np.testing.assert_allclose(xs, [0.0, 0.5, 1.0, 1.5])
        np.testing.assert_allclose(ys, 1.0 + xs ** 2)


# ═══════════════════════════════════════════════════════════════════════
# Metadata
# ═══════════════════════════════════════════════════════════════════════


class TestFitMetadata:

    def test_info(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2), pivoting='on_zero')
        assert result.backend_name == 'cpu_gauss_jordan'
        assert result.info['method'] == 'gauss_jordan'
        assert result.info['ring'] == 'float64'
        assert result.info['pivoting'] == 'on_zero'
        assert result.info['tol'] > 0
        assert result.info['tolerance_tier'] == 'float64'
        assert result.info['expected_rtol'] == tolerances.FLOAT64.rtol

    def test_timing_sections(self, quadratic_points):
        timing = fit(quadratic_points, polynomial(2)).timing
        assert 'total_seconds' in timing
        for section in ('normal_equations', 'solve', 'residuals'):
            assert section in timing

    def test_ill_conditioned_warning(self):
        points = [(10000.0, 1.0), (10001.0, 2.0), (10002.0, 3.0)]
        result = fit(points, polynomial(1))
        assert result.warnings
        assert "ill-conditioned" in result.warnings[0]
        assert result.ill_conditioned
        assert result.info['tolerance_tier'] == 'float64_ill_conditioned'

    def test_well_conditioned_no_warning(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2))
        assert result.warnings == ()
        assert not result.ill_conditioned

    def test_rational_tier_is_exact(self, quadratic_points):
        result = fit(quadratic_points, polynomial(2), ring='rational')
        assert result.info['tolerance_tier'] == 'rational'
        assert result.info['expected_atol'] == 0.0

    def test_summary(self, quadratic_points):
        text = fit(quadratic_points, polynomial(2)).summary()
        assert "Least-Squares Fit Results" in text
        assert "Samples: 4" in text
        assert "x^2" in text
        assert "Solution:" in text
        assert "Backend: cpu_gauss_jordan" in text

    def test_repr(self, quadratic_points):
        assert repr(fit(quadratic_points, polynomial(2))).startswith("FitSolution(n=4, p=3")


class TestBackendDirect:

    def test_implements_backend_protocol(self):
        assert isinstance(GaussJordanBackend(), Backend)

    def test_backend_solve(self, quadratic_points):
        design = FitDesign.from_points(quadratic_points, polynomial(2))
        result = GaussJordanBackend(ring=RATIONAL).solve(design)
        assert result.params.solution_matrix.data == (1, 0, 1)
        assert result.backend_name == 'cpu_gauss_jordan'

    def test_explicit_tolerance(self, quadratic_points):
        design = FitDesign.from_points(quadratic_points, polynomial(2))
        result = GaussJordanBackend(tol=1e-3).solve(design)
        assert result.info['tol'] == 1e-3

    def test_tolerance_disabled(self, quadratic_points):
        design = FitDesign.from_points(quadratic_points, polynomial(2))
        assert GaussJordanBackend(tol=None).solve(design).info['tol'] is None
