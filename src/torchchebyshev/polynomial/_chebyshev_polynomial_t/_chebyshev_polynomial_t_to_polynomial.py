from .._polynomial import Polynomial, polynomial, polynomial_variable
from ._chebyshev_polynomial_t import ChebyshevPolynomialT


def chebyshev_polynomial_t_to_polynomial(
    c: ChebyshevPolynomialT,
) -> Polynomial:
    """Convert Chebyshev series to power polynomial.

    Parameters
    ----------
    c : ChebyshevPolynomialT
        Chebyshev series.

    Returns
    -------
    Polynomial
        Equivalent power polynomial in the same variable.

    Notes
    -----
    Runs the Clenshaw recurrence with polynomials in place of numbers:

        c0, c1 = c[n-2], c[n-1]
        c0, c1 = c[i] - c1, c0 + 2*x*c1    for i = n-3, ..., 0
        p = c0 + x*c1

    Series with fewer than three coefficients already have the same
    coefficients in both bases.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([0.0, 0.0, 1.0]))  # T_2
    >>> chebyshev_polynomial_t_to_polynomial(c).coeffs  # T_2 = 2x^2 - 1
    tensor([-1.,  0.,  2.])
    """
    coeffs = c.coeffs
    n = coeffs.shape[-1]

    if n < 3:
        return polynomial(coeffs.clone(), c.var)

    x = polynomial_variable(c.var, dtype=coeffs.dtype, device=coeffs.device)

    c0 = polynomial(coeffs[n - 2], c.var)
    c1 = polynomial(coeffs[n - 1], c.var)

    for i in range(n - 1, 1, -1):
        tmp = c0
        c0 = polynomial(coeffs[i - 2], c.var) - c1
        c1 = tmp + c1 * x * 2

    return c0 + c1 * x
