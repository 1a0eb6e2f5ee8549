"""
Scalar rings.

Each ring is a small stateless object implementing the Ring protocol for
one scalar type. Matrices hold plain Python/NumPy scalars; the ring is the
"number operations" object the algebra and solver call through.

Rings:
    FLOAT64: numpy.float64 elements
    FLOAT32: numpy.float32 elements (arithmetic stays in single precision)
    RATIONAL: fractions.Fraction elements (exact)
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any

import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Ring


class FloatRing:
    """
    Ring over a NumPy floating type.

    inv() of zero follows IEEE semantics (inf); the solver never calls it
    on a zero pivot.
    """

    __slots__ = ('_type',)

    def __init__(self, dtype: type[np.floating]):
        if not np.issubdtype(dtype, np.floating):
            raise ValidationError(f"FloatRing: expected a floating dtype, got {dtype!r}")
        self._type = np.dtype(dtype).type

    @property
    def name(self) -> str:
        return np.dtype(self._type).name

    @property
    def dtype(self) -> type[np.floating]:
        return self._type

    @property
    def zero(self) -> np.floating:
        return self._type(0.0)

    @property
    def one(self) -> np.floating:
        return self._type(1.0)

    def coerce(self, value: Any) -> np.floating:
        return self._type(float(value))

    def add(self, a, b):
        return a + b

    def mul(self, a, b):
        return a * b

    def neg(self, a):
        return -a

    def inv(self, a):
        return self.one / a

    def eq(self, a, b) -> bool:
        return bool(a == b)

    def is_zero(self, a) -> bool:
        return bool(a == 0)

    def magnitude(self, a) -> float:
        return float(abs(a))

    def __repr__(self) -> str:
        return f"FloatRing({self.name})"


class RationalRing:
    """Exact ring over fractions.Fraction."""

    __slots__ = ()

    @property
    def name(self) -> str:
        return 'rational'

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def coerce(self, value: Any) -> Fraction:
        # Fraction() rejects NumPy scalars that don't subclass float/int
        if isinstance(value, np.integer):
            value = int(value)
        elif isinstance(value, np.floating):
            value = float(value)
        try:
            return Fraction(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"RationalRing: cannot represent {value!r} exactly: {e}") from e

    def add(self, a, b):
        return a + b

    def mul(self, a, b):
        return a * b

    def neg(self, a):
        return -a

    def inv(self, a):
        return Fraction(1) / a

    def eq(self, a, b) -> bool:
        return a == b

    def is_zero(self, a) -> bool:
        return a == 0

    def magnitude(self, a) -> float:
        return float(abs(a))

    def __repr__(self) -> str:
        return "RationalRing()"


FLOAT64 = FloatRing(np.float64)
FLOAT32 = FloatRing(np.float32)
RATIONAL = RationalRing()

_RINGS: dict[str, Ring] = {
    'float64': FLOAT64,
    'float32': FLOAT32,
    'rational': RATIONAL,
}


def get_ring(choice: str | Ring) -> Ring:
    """
    Resolve a ring name or pass a Ring object through.

    Raises:
        ValueError: If choice is an unknown ring name
    """
    if isinstance(choice, str):
        try:
            return _RINGS[choice]
        except KeyError:
            raise ValueError(
                f"Unknown ring: {choice!r}. Valid options: {sorted(_RINGS)}"
            ) from None
    return choice


def ring_of(value: Any) -> Ring:
    """
    Infer a ring from a sample element.

    float and np.float64 map to FLOAT64, np.float32 to FLOAT32, Fraction and
    integers to RATIONAL (integers have no inverse of their own).

    Raises:
        ValidationError: If no ring handles the element's type
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError("ring_of: booleans are not ring elements")
    if isinstance(value, np.float32):
        return FLOAT32
    if isinstance(value, (float, np.float64)):
        return FLOAT64
    if isinstance(value, (Fraction, int, np.integer)):
        return RATIONAL
    raise ValidationError(
        f"ring_of: no ring for element type {type(value).__name__}; pass ring= explicitly"
    )


__all__ = [
    'FloatRing',
    'RationalRing',
    'FLOAT64',
    'FLOAT32',
    'RATIONAL',
    'get_ring',
    'ring_of',
]
