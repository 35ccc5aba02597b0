from ._chebyshev_polynomial_t import ChebyshevPolynomialT
from ._chebyshev_polynomial_t_divmod import chebyshev_polynomial_t_divmod


def chebyshev_polynomial_t_div(
    a: ChebyshevPolynomialT,
    b: ChebyshevPolynomialT,
) -> ChebyshevPolynomialT:
    """Quotient of Chebyshev series division (``a // b``)."""
    quotient, _ = chebyshev_polynomial_t_divmod(a, b)

    return quotient
