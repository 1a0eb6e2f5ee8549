"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Precision tiers per scalar ring
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
