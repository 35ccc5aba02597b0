import torch

from .._invalid_argument_error import InvalidArgumentError
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    _nan_chebyshev_polynomial_t,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_derivative(
    a: ChebyshevPolynomialT,
    order: int = 1,
) -> ChebyshevPolynomialT:
    """Compute derivative of Chebyshev series.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        Series to differentiate.
    order : int, optional
        Order of derivative. Default is 1.

    Returns
    -------
    ChebyshevPolynomialT
        Derivative series. ``order == 0`` returns an equal series backed by
        a copy of the coefficients. A series containing NaN gives the
        single-coefficient NaN series, and ``order`` above the degree gives
        the zero series.

    Raises
    ------
    InvalidArgumentError
        If order is negative.

    Notes
    -----
    Each pass walks the coefficients of a private working copy from the
    top down. With n the current degree, for j = n, ..., 3:

        d_{j-1} = 2*j*w_j
        w_{j-2} += j*w_j / (j - 2)

    then d_1 = 4*w_2 (when n > 1) and d_0 = w_1. Folding w_j into w_{j-2}
    must happen in descending order, before w_{j-2} is itself consumed.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([0.0, 0.0, 1.0]))  # T_2
    >>> chebyshev_polynomial_t_derivative(a).coeffs  # d/dx T_2 = 4*T_1
    tensor([0., 4.])
    """
    if order < 0:
        raise InvalidArgumentError(
            f"Order must be non-negative, got {order}"
        )

    coeffs = a.coeffs

    if order == 0:
        return chebyshev_polynomial_t(coeffs.clone(), a.var)

    if torch.isnan(coeffs).any():
        return _nan_chebyshev_polynomial_t(a)

    n = coeffs.shape[-1] - 1

    if order > n:
        return chebyshev_polynomial_t(
            torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device), a.var
        )

    w = coeffs.clone()

    for _ in range(order):
        der = torch.zeros(n, dtype=w.dtype, device=w.device)

        for j in range(n, 2, -1):
            der[j - 1] = 2 * j * w[j]
            w[j - 2] = w[j - 2] + j * w[j] / (j - 2)

        if n > 1:
            der[1] = 4 * w[2]

        der[0] = w[1]

        w = der
        n = n - 1

    return chebyshev_polynomial_t(w, a.var)
