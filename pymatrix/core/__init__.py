"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
core and by the least-squares fitting layer.

Key components:
    protocols: Ring, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.protocols import Ring, Backend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Ring",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
