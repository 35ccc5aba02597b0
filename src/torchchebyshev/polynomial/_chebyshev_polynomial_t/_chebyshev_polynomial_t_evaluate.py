import torch
from torch import Tensor

from .._coefficients import as_points
from ._chebyshev_polynomial_t import ChebyshevPolynomialT


def chebyshev_polynomial_t_evaluate(
    c: ChebyshevPolynomialT,
    x,
) -> Tensor:
    """Evaluate Chebyshev series at points using Clenshaw's algorithm.

    Parameters
    ----------
    c : ChebyshevPolynomialT
        Chebyshev series with coefficients shape (N,).
    x : Tensor or Number
        Evaluation points, any shape. Real or complex.

    Returns
    -------
    Tensor
        Values c(x), same shape as x, in the promoted dtype of the
        coefficients and x.

    Notes
    -----
    Uses Clenshaw's algorithm for numerical stability. With the last two
    coefficients as seeds, the pair (c0, c1) is updated from the top down

        c0, c1 = coeffs[i] - c1, c0 + 2*x*c1

    and f(x) = c0 + x*c1. Both values are updated simultaneously: the new
    c0 uses the previous c1.

    No domain check is made; the recurrence is valid for every x.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2*T_1 + 3*T_2
    >>> chebyshev_polynomial_t_evaluate(c, torch.tensor([0.0]))
    tensor([-2.])  # 1 + 0 + 3*(-1) = -2
    """
    coeffs = c.coeffs
    x = as_points(x, coeffs)

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    n = coeffs.shape[-1]

    if n == 0:
        return torch.zeros_like(x)

    if n == 1:
        return coeffs[0] * torch.ones_like(x)

    c0 = coeffs[-2]
    c1 = coeffs[-1]

    for i in range(n - 3, -1, -1):
        c0, c1 = coeffs[i] - c1, c0 + c1 * 2 * x

    return c0 + c1 * x
