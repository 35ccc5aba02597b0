import torch

from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_trim(
    c: ChebyshevPolynomialT,
    tol: float = 0.0,
) -> ChebyshevPolynomialT:
    """Drop trailing coefficients whose magnitude is at most ``tol``.

    Only the tail is inspected; small interior coefficients survive. When
    no coefficient exceeds ``tol`` the zero series is returned.

    Parameters
    ----------
    c : ChebyshevPolynomialT
        Series to trim.
    tol : float, optional
        Absolute threshold. Default is 0.0, which removes nothing that is
        not already zero.

    Returns
    -------
    ChebyshevPolynomialT
        A new series; ``c`` is not modified.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([1.0, 2.0, 1e-12]))
    >>> chebyshev_polynomial_t_trim(c, tol=1e-10).coeffs
    tensor([1., 2.])
    """
    coeffs = c.coeffs

    significant = torch.nonzero(torch.abs(coeffs) > tol)

    if significant.numel() == 0:
        return chebyshev_polynomial_t(torch.zeros_like(coeffs[:1]), c.var)

    last = int(significant[-1, 0])

    return chebyshev_polynomial_t(coeffs[: last + 1].clone(), c.var)
