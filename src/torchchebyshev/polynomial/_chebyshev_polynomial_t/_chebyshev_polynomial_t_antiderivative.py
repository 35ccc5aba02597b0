from numbers import Number
from typing import Union

import torch
from torch import Tensor

from .._invalid_argument_error import InvalidArgumentError
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    _nan_chebyshev_polynomial_t,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_evaluate import chebyshev_polynomial_t_evaluate


def _integrate_once(coeffs: Tensor, k: Tensor) -> Tensor:
    n = coeffs.shape[-1]

    if n == 1:
        return torch.stack([k, coeffs[0]])

    a = torch.zeros(n + 1, dtype=coeffs.dtype, device=coeffs.device)

    a[1] = coeffs[0]
    a[2] = coeffs[1] / 4

    for j in range(2, n):
        a[j + 1] = coeffs[j] / (2 * (j + 1))
        a[j - 1] = a[j - 1] - coeffs[j] / (2 * (j - 1))

    # Choose the T_0 coefficient so that the antiderivative is k at x = 0
    value = chebyshev_polynomial_t_evaluate(chebyshev_polynomial_t(a), 0.0)

    return torch.cat([(a[0] + k - value).reshape(1), a[1:]])


def chebyshev_polynomial_t_antiderivative(
    a: ChebyshevPolynomialT,
    order: int = 1,
    constant: Union[Number, Tensor] = 0.0,
) -> ChebyshevPolynomialT:
    """Compute antiderivative of Chebyshev series.

    Uses the formula:
        A_1 = c_0 - c_2/2
        A_k = (c_{k-1} - c_{k+1}) / (2k)  for k >= 2
        A_0 = constant - A(0)

    The constant of integration is chosen such that the antiderivative
    evaluates to `constant` at x=0, matching NumPy's chebint behavior.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        Series to integrate.
    order : int, optional
        Order of integration. Default is 1.
    constant : float, complex or Tensor, optional
        Integration constant. The antiderivative will evaluate to this
        value at x=0. Later passes of a repeated integration use 0.
        A complex constant promotes a real series to the matching complex
        dtype. Default is 0.0.

    Returns
    -------
    ChebyshevPolynomialT
        Antiderivative series. A NaN coefficient or a NaN constant gives
        the single-coefficient NaN series.

    Raises
    ------
    InvalidArgumentError
        If order is negative.

    Notes
    -----
    The degree increases by 1 for each integration.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0]))  # constant 1 = T_0
    >>> chebyshev_polynomial_t_antiderivative(a).coeffs  # integral(1) = T_1
    tensor([0., 1.])
    """
    if order < 0:
        raise InvalidArgumentError(
            f"Order must be non-negative, got {order}"
        )

    coeffs = a.coeffs

    if order == 0:
        return chebyshev_polynomial_t(coeffs.clone(), a.var)

    k = torch.as_tensor(constant, device=coeffs.device)

    if bool(torch.isnan(coeffs).any()) or bool(torch.isnan(k).any()):
        return _nan_chebyshev_polynomial_t(a)

    # A complex constant makes the whole antiderivative complex
    dtype = torch.result_type(coeffs, constant)

    coeffs = coeffs.to(dtype)
    k = k.to(dtype).reshape(())

    for i in range(order):
        coeffs = _integrate_once(coeffs, k if i == 0 else torch.zeros_like(k))

    return chebyshev_polynomial_t(coeffs, a.var)
