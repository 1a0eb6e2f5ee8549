"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError so callers can catch any
library-specific error in one place. Out-of-bounds element access is not
an error in this library (it yields None), so it has no exception here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when caller-provided inputs fail validation checks: non-numeric
    sample points, NaN/Inf values, unknown scalar types, or a solver call
    that passes the same matrix as both coefficient and right-hand side.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or array dimensions are incorrect or inconsistent.
    
    Raised when adding matrices of different shapes, multiplying matrices
    whose inner dimensions disagree, solving with a non-square coefficient
    matrix, or building a matrix from ragged rows.
    
    Attributes:
        expected: Expected shape, if known
        actual: Shape that was received, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised by the Gauss-Jordan solver when no usable pivot exists for a
    column, which for least-squares fitting usually means too few distinct
    sample points or a basis set that is linearly dependent at the sampled
    x-values.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Number of pivots found before elimination stopped
        expected_rank: Rank a nonsingular matrix would have (its size)
        column: Column index where no pivot could be found
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
        self.column = column
