"""Chebyshev polynomials of the first kind."""

from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_add import chebyshev_polynomial_t_add
from ._chebyshev_polynomial_t_antiderivative import (
    chebyshev_polynomial_t_antiderivative,
)
from ._chebyshev_polynomial_t_companion import chebyshev_polynomial_t_companion
from ._chebyshev_polynomial_t_degree import chebyshev_polynomial_t_degree
from ._chebyshev_polynomial_t_derivative import (
    chebyshev_polynomial_t_derivative,
)
from ._chebyshev_polynomial_t_div import chebyshev_polynomial_t_div
from ._chebyshev_polynomial_t_divmod import chebyshev_polynomial_t_divmod
from ._chebyshev_polynomial_t_equal import chebyshev_polynomial_t_equal
from ._chebyshev_polynomial_t_evaluate import chebyshev_polynomial_t_evaluate
from ._chebyshev_polynomial_t_fit import chebyshev_polynomial_t_fit
from ._chebyshev_polynomial_t_from_roots import (
    chebyshev_polynomial_t_from_roots,
)
from ._chebyshev_polynomial_t_integral import chebyshev_polynomial_t_integral
from ._chebyshev_polynomial_t_interpolate import (
    chebyshev_polynomial_t_interpolate,
)
from ._chebyshev_polynomial_t_mod import chebyshev_polynomial_t_mod
from ._chebyshev_polynomial_t_multiply import chebyshev_polynomial_t_multiply
from ._chebyshev_polynomial_t_mulx import chebyshev_polynomial_t_mulx
from ._chebyshev_polynomial_t_negate import chebyshev_polynomial_t_negate
from ._chebyshev_polynomial_t_points import chebyshev_polynomial_t_points
from ._chebyshev_polynomial_t_pow import chebyshev_polynomial_t_pow
from ._chebyshev_polynomial_t_roots import chebyshev_polynomial_t_roots
from ._chebyshev_polynomial_t_scale import chebyshev_polynomial_t_scale
from ._chebyshev_polynomial_t_subtract import chebyshev_polynomial_t_subtract
from ._chebyshev_polynomial_t_to_polynomial import (
    chebyshev_polynomial_t_to_polynomial,
)
from ._chebyshev_polynomial_t_trim import chebyshev_polynomial_t_trim
from ._chebyshev_polynomial_t_truncate import chebyshev_polynomial_t_truncate
from ._chebyshev_polynomial_t_vandermonde import (
    chebyshev_polynomial_t_vandermonde,
)
from ._chebyshev_polynomial_t_variable import chebyshev_polynomial_t_variable
from ._chebyshev_polynomial_t_weight import chebyshev_polynomial_t_weight
from ._chebyshev_polynomial_t_zseries import (
    chebyshev_polynomial_t_to_zseries,
    zseries_to_chebyshev_polynomial_t,
)
from ._polynomial_to_chebyshev_polynomial_t import (
    polynomial_to_chebyshev_polynomial_t,
)

__all__ = [
    "ChebyshevPolynomialT",
    "chebyshev_polynomial_t",
    "chebyshev_polynomial_t_add",
    "chebyshev_polynomial_t_antiderivative",
    "chebyshev_polynomial_t_companion",
    "chebyshev_polynomial_t_degree",
    "chebyshev_polynomial_t_derivative",
    "chebyshev_polynomial_t_div",
    "chebyshev_polynomial_t_divmod",
    "chebyshev_polynomial_t_equal",
    "chebyshev_polynomial_t_evaluate",
    "chebyshev_polynomial_t_fit",
    "chebyshev_polynomial_t_from_roots",
    "chebyshev_polynomial_t_integral",
    "chebyshev_polynomial_t_interpolate",
    "chebyshev_polynomial_t_mod",
    "chebyshev_polynomial_t_multiply",
    "chebyshev_polynomial_t_mulx",
    "chebyshev_polynomial_t_negate",
    "chebyshev_polynomial_t_points",
    "chebyshev_polynomial_t_pow",
    "chebyshev_polynomial_t_roots",
    "chebyshev_polynomial_t_scale",
    "chebyshev_polynomial_t_subtract",
    "chebyshev_polynomial_t_to_polynomial",
    "chebyshev_polynomial_t_to_zseries",
    "chebyshev_polynomial_t_trim",
    "chebyshev_polynomial_t_truncate",
    "chebyshev_polynomial_t_vandermonde",
    "chebyshev_polynomial_t_variable",
    "chebyshev_polynomial_t_weight",
    "polynomial_to_chebyshev_polynomial_t",
    "zseries_to_chebyshev_polynomial_t",
]
