import torch
from torch import Tensor

from .._coefficients import as_points
from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Tensor or Number
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Values p(x), same shape as x, in the promoted dtype of the
        coefficients and x.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    coeffs = p.coeffs
    x = as_points(x, coeffs)

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    result = coeffs[-1] * torch.ones_like(x)

    for i in range(coeffs.shape[-1] - 2, -1, -1):
        result = result * x + coeffs[i]

    return result
