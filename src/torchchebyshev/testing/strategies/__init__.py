"""Hypothesis strategies for Chebyshev series testing."""

from ._chebyshev_coefficients import chebyshev_coefficients
from ._chebyshev_domain import chebyshev_domain
from ._chebyshev_roots import chebyshev_roots
from ._real_numbers import real_numbers

__all__ = [
    # Numeric strategies
    "real_numbers",
    "chebyshev_domain",
    # Tensor strategies
    "chebyshev_coefficients",
    "chebyshev_roots",
]
