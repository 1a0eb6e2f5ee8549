"""
Generic result container for PyMatrix computations.

The Result class is the envelope every backend returns. It lets the
fitting layer carry timing, solver diagnostics and non-fatal warnings
alongside the payload without each payload type reinventing them.

Design decisions:
    - Generic over parameter payload P
    - info dict for solver metadata (pivoting policy, row swaps, tolerance)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.
    
    Type Parameters:
        P: The payload type (e.g. FitParams)
        
    Attributes:
        params: Payload computed by the backend
        info: Structured metadata (method, pivoting, swaps, tolerance)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=FitParams(coefficients=coef, ...),
        ...     info={'method': 'gauss_jordan', 'pivoting': 'partial', 'swaps': 1},
        ...     timing={'total_seconds': 0.002, 'solve': 0.001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
