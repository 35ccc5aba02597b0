"""Polynomials in the Chebyshev basis of the first kind and the power basis.

Each basis is a ``tensorclass`` value type holding a 1-D ``coeffs`` tensor
in ascending order and a ``var`` label. Operations are free functions named
``<basis>_<operation>`` and are also reachable through operator overloads.
"""

from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
    chebyshev_polynomial_t_add,
    chebyshev_polynomial_t_antiderivative,
    chebyshev_polynomial_t_companion,
    chebyshev_polynomial_t_degree,
    chebyshev_polynomial_t_derivative,
    chebyshev_polynomial_t_div,
    chebyshev_polynomial_t_divmod,
    chebyshev_polynomial_t_equal,
    chebyshev_polynomial_t_evaluate,
    chebyshev_polynomial_t_fit,
    chebyshev_polynomial_t_from_roots,
    chebyshev_polynomial_t_integral,
    chebyshev_polynomial_t_interpolate,
    chebyshev_polynomial_t_mod,
    chebyshev_polynomial_t_multiply,
    chebyshev_polynomial_t_mulx,
    chebyshev_polynomial_t_negate,
    chebyshev_polynomial_t_points,
    chebyshev_polynomial_t_pow,
    chebyshev_polynomial_t_roots,
    chebyshev_polynomial_t_scale,
    chebyshev_polynomial_t_subtract,
    chebyshev_polynomial_t_to_polynomial,
    chebyshev_polynomial_t_to_zseries,
    chebyshev_polynomial_t_trim,
    chebyshev_polynomial_t_truncate,
    chebyshev_polynomial_t_vandermonde,
    chebyshev_polynomial_t_variable,
    chebyshev_polynomial_t_weight,
    polynomial_to_chebyshev_polynomial_t,
    zseries_to_chebyshev_polynomial_t,
)
from ._coefficients import DEFAULT_VARIABLE
from ._convolve import convolve
from ._degree_error import DegreeError
from ._division_by_zero_error import DivisionByZeroError
from ._domain_error import DomainError
from ._invalid_argument_error import InvalidArgumentError
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_degree,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_multiply,
    polynomial_negate,
    polynomial_scale,
    polynomial_subtract,
    polynomial_variable,
)
from ._polynomial_error import PolynomialError
from ._variable_mismatch_error import VariableMismatchError

__all__ = [
    # Exceptions
    "DegreeError",
    "DivisionByZeroError",
    "DomainError",
    "InvalidArgumentError",
    "PolynomialError",
    "VariableMismatchError",
    # Configuration
    "DEFAULT_VARIABLE",
    # Chebyshev polynomials of the first kind
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
    # Power basis
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_degree",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_variable",
    # Utilities
    "convolve",
]
