"""
Tolerance tiers for numerical validation.

Defines precision expectations for each scalar ring:
- float64: double precision Gauss-Jordan on well-conditioned systems
- float32: relaxed for single-precision arithmetic
- rational: exact arithmetic, no tolerance at all

The fitting backend reads pivot_eps for its automatic singularity
tolerance, and reports the tier matching the ring and the conditioning of
the solve (rtol/atol as the accuracy to expect of the coefficients). Tests
compare against the same tiers.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str
    pivot_eps: float


FLOAT64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='float64',
    description='Double precision elimination, well-conditioned system',
    pivot_eps=float(np.finfo(np.float64).eps),
)

# Normal equations square the condition number of the design matrix, so
# polynomial fits over wide x ranges land here.
FLOAT64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='float64_ill_conditioned',
    description='Double precision elimination, ill-conditioned (cond > 1e6)',
    pivot_eps=float(np.finfo(np.float64).eps),
)

FLOAT32 = ToleranceTier(
    rtol=1e-3,
    atol=1e-4,
    name='float32',
    description='Single precision elimination',
    pivot_eps=float(np.finfo(np.float32).eps),
)

RATIONAL = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='rational',
    description='Exact rational arithmetic',
    pivot_eps=0.0,
)

CONDITION_THRESHOLD = 1e6


def select_tolerance(
    ring_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given scalar ring."""
    if ring_name == 'rational':
        return RATIONAL
    if ring_name == 'float32':
        return FLOAT32
    if is_ill_conditioned:
        return FLOAT64_ILL_CONDITIONED
    return FLOAT64
