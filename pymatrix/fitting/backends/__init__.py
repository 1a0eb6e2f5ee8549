"""
Fitting backends.

Each backend implements the Backend protocol for FitDesign -> FitParams.
"""

from pymatrix.fitting.backends.cpu import GaussJordanBackend

__all__ = ["GaussJordanBackend"]
