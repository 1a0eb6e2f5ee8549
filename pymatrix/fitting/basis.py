"""
Basis function sets for least-squares curve fitting.

A fitted curve is sum_i coef_i * f_i(x). Every basis function must accept
a float or a NumPy array, so the same set builds the design matrix (one
sample at a time) and evaluates the fitted curve (vectorized).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Sequence

import numpy as np

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class BasisFunction:
    """A named scalar function of x."""
    name: str
    func: Callable[[Any], Any]

    def __call__(self, x):
        return self.func(x)


@dataclass(frozen=True)
class BasisSet:
    """
    Ordered, immutable set of basis functions.

    Column j of a design matrix holds functions[j] evaluated at every
    sample's x-coordinate.
    """
    functions: tuple[BasisFunction, ...]

    def __post_init__(self):
        if not self.functions:
            raise ValidationError("BasisSet: at least one basis function is required")

    @classmethod
    def from_callables(
        cls,
        funcs: Iterable[Callable[[Any], Any]],
        names: Sequence[str] | None = None,
    ) -> BasisSet:
        """Wrap plain callables; names default to f0, f1, ..."""
        funcs = list(funcs)
        if names is None:
            names = [f"f{i}" for i in range(len(funcs))]
        if len(names) != len(funcs):
            raise ValidationError(
                f"BasisSet: {len(names)} names given for {len(funcs)} functions"
            )
        return cls(tuple(BasisFunction(n, f) for n, f in zip(names, funcs)))

    def __len__(self) -> int:
        return len(self.functions)

    def __iter__(self) -> Iterator[BasisFunction]:
        return iter(self.functions)

    def __getitem__(self, i: int) -> BasisFunction:
        return self.functions[i]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.functions)

    def evaluate(self, x: float) -> list:
        """Row of basis values at x."""
        return [f(x) for f in self.functions]


def _power(k: int) -> Callable[[Any], Any]:
    # x ** 0 keeps the shape of array inputs, unlike a bare constant
    return lambda x: x ** k


def _sine(period: float) -> Callable[[Any], Any]:
    return lambda x: np.sin(x / period)


def polynomial(degree: int) -> BasisSet:
    """
    Monomials 1, x, x^2, ..., x^degree.

    Raises:
        ValidationError: If degree is negative
    """
    if degree < 0:
        raise ValidationError(f"polynomial: degree must be >= 0, got {degree}")
    names = ['1', 'x'] + [f'x^{k}' for k in range(2, degree + 1)]
    return BasisSet(tuple(
        BasisFunction(names[k], _power(k)) for k in range(degree + 1)
    ))


def sinusoids(periods: Iterable[float], with_constant: bool = True) -> BasisSet:
    """
    sin(x / p) for each period p, optionally preceded by a constant 1.

    Raises:
        ValidationError: If a period is zero
    """
    functions = [BasisFunction('1', _power(0))] if with_constant else []
    for p in periods:
        if p == 0:
            raise ValidationError("sinusoids: period must be nonzero")
        functions.append(BasisFunction(f'sin(x/{p:g})', _sine(p)))
    return BasisSet(tuple(functions))


__all__ = ['BasisFunction', 'BasisSet', 'polynomial', 'sinusoids']
