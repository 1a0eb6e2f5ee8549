"""
Core protocols for PyMatrix.

These define structural interfaces that concrete implementations must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing): a scalar ring or a fitting backend only has to provide the
operations, it never has to inherit from anything here.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms call
    - Each concrete ring implements the capability set independently
    - Generic payloads so result types survive through the pipeline
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables
A = TypeVar('A')  # Scalar element type
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Ring(Protocol[A]):
    """
    Scalar capability set required by matrix algebra and the solver.

    A ring here is a commutative ring with a multiplicative inverse defined
    for nonzero elements. Plain construction and element access need none
    of this; only add(), matmul(), identity() and solve() do.

    Implementations are small stateless objects, one per scalar type
    (float64, float32, rational, ...). Matrices never store a ring: the
    algebra functions take one explicitly or infer it from an element.
    """

    @property
    def name(self) -> str:
        """Short identifier, e.g. 'float64' or 'rational'."""
        ...

    @property
    def zero(self) -> A:
        """Additive identity."""
        ...

    @property
    def one(self) -> A:
        """Multiplicative identity."""
        ...

    def coerce(self, value: Any) -> A:
        """Convert an arbitrary number into this ring's element type."""
        ...

    def add(self, a: A, b: A) -> A:
        ...

    def mul(self, a: A, b: A) -> A:
        ...

    def neg(self, a: A) -> A:
        ...

    def inv(self, a: A) -> A:
        """
        Multiplicative inverse.

        Only defined for nonzero values. Callers (the solver) must check
        is_zero() first; behaviour on zero is implementation-specific.
        """
        ...

    def eq(self, a: A, b: A) -> bool:
        """
        Element equality.

        Must agree with the element type's own ==, which Matrix.__eq__ uses
        directly. Provided for generic code that compares elements without
        knowing their type; the algebra and the solver do not call it.
        """
        ...

    def is_zero(self, a: A) -> bool:
        ...

    def magnitude(self, a: A) -> float:
        """
        Non-negative size of an element.

        Used to rank pivot candidates and to compare against tolerances.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope
    with a payload. Backends are stateless apart from construction-time
    configuration (ring, pivoting policy, tolerance).

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing the payload and metadata

        Raises:
            SingularMatrixError: If the system has no unique solution
            ValidationError: If design is invalid for this backend
        """
        ...
