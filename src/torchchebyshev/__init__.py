"""torchchebyshev: Chebyshev series of the first kind for PyTorch."""

from . import polynomial

__all__ = [
    "polynomial",
]

__version__ = "0.1.0"
