from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_negate(
    a: ChebyshevPolynomialT,
) -> ChebyshevPolynomialT:
    """Additive inverse ``-a``; the variable label is kept."""
    return chebyshev_polynomial_t(-a.coeffs, a.var)
