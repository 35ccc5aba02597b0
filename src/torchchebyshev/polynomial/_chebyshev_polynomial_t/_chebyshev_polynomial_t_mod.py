from ._chebyshev_polynomial_t import ChebyshevPolynomialT
from ._chebyshev_polynomial_t_divmod import chebyshev_polynomial_t_divmod


def chebyshev_polynomial_t_mod(
    a: ChebyshevPolynomialT,
    b: ChebyshevPolynomialT,
) -> ChebyshevPolynomialT:
    """Remainder of Chebyshev series division (``a % b``)."""
    _, remainder = chebyshev_polynomial_t_divmod(a, b)

    return remainder
