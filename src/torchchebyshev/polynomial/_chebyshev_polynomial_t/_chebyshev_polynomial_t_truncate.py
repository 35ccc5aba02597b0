from typing import Optional

import torch

from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_truncate(
    c: ChebyshevPolynomialT,
    rtol: Optional[float] = None,
    atol: float = 0.0,
) -> ChebyshevPolynomialT:
    """Zero out negligible coefficients and drop trailing zeros.

    Every coefficient with magnitude at most ``max(atol, rtol * max|c|)``
    is set to zero, wherever it sits in the series.

    Parameters
    ----------
    c : ChebyshevPolynomialT
        Chebyshev series.
    rtol : float, optional
        Relative tolerance. Default is the machine epsilon of the
        coefficient dtype.
    atol : float, optional
        Absolute tolerance. Default is 0.0.

    Returns
    -------
    ChebyshevPolynomialT
        Truncated series with at least one coefficient.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([1.0, 1e-20, 2.0, 1e-20]))
    >>> chebyshev_polynomial_t_truncate(c).coeffs
    tensor([1., 0., 2.])
    """
    coeffs = c.coeffs

    if rtol is None:
        rtol = torch.finfo(coeffs.dtype).eps

    magnitude = torch.abs(coeffs)

    threshold = max(atol, rtol * float(magnitude.detach().max()))

    coeffs = torch.where(
        magnitude <= threshold, torch.zeros_like(coeffs), coeffs
    )

    return chebyshev_polynomial_t(coeffs, c.var)
