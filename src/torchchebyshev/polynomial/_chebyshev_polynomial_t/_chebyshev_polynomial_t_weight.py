import warnings

import torch
from torch import Tensor

from ._chebyshev_polynomial_t import ChebyshevPolynomialT


def chebyshev_polynomial_t_weight(x) -> Tensor:
    """Orthogonality weight ``1 / sqrt(1 - x^2)`` of the first-kind basis.

    With this weight ``T_m`` and ``T_n`` are orthogonal on [-1, 1] for
    ``m != n``. The weight diverges at the endpoints and is NaN outside
    the interval.

    Parameters
    ----------
    x : Tensor or sequence
        Points, any shape.

    Returns
    -------
    Tensor
        Weight values, same shape as ``x``.

    Warns
    -----
    UserWarning
        If any point lies outside ``ChebyshevPolynomialT.DOMAIN``.

    Examples
    --------
    >>> chebyshev_polynomial_t_weight(torch.tensor([0.0]))
    tensor([1.])
    """
    x = torch.as_tensor(x)

    lower, upper = ChebyshevPolynomialT.DOMAIN

    if bool(((x < lower) | (x > upper)).any()):
        warnings.warn(
            f"ChebyshevPolynomialT weight requested outside natural domain "
            f"[{lower}, {upper}]; those values are NaN",
            stacklevel=2,
        )

    return torch.rsqrt(1.0 - x * x)
