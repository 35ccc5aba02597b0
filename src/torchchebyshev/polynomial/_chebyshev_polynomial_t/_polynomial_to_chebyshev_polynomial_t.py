from .._polynomial import Polynomial
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_add import chebyshev_polynomial_t_add
from ._chebyshev_polynomial_t_mulx import chebyshev_polynomial_t_mulx


def polynomial_to_chebyshev_polynomial_t(
    p: Polynomial,
) -> ChebyshevPolynomialT:
    """Re-express a power-basis polynomial in the Chebyshev basis.

    Nested multiplication carried out in the Chebyshev basis: with
    ``r = 0``, for ``i = n, ..., 0`` set ``r = x * r + p_i``, where ``x *``
    is :func:`chebyshev_polynomial_t_mulx` and adding ``p_i`` touches only
    the ``T_0`` coefficient.

    Parameters
    ----------
    p : Polynomial
        Power-basis polynomial.

    Returns
    -------
    ChebyshevPolynomialT
        Series in ``p``'s variable with the same values.

    Examples
    --------
    >>> p = polynomial(torch.tensor([0.0, 0.0, 1.0]))  # x^2
    >>> polynomial_to_chebyshev_polynomial_t(p).coeffs  # (T_0 + T_2)/2
    tensor([0.5000, 0.0000, 0.5000])
    """
    result = chebyshev_polynomial_t(p.coeffs.new_zeros(1), p.var)

    for coefficient in p.coeffs.flip(-1):
        result = chebyshev_polynomial_t_add(
            chebyshev_polynomial_t_mulx(result), coefficient
        )

    return result
