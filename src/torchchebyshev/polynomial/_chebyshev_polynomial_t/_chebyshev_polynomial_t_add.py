from numbers import Number

import torch
from torch import Tensor

from .._variable_mismatch_error import check_same_variable
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def _pad_to(coeffs: Tensor, n: int) -> Tensor:
    return torch.nn.functional.pad(coeffs, [0, n - coeffs.shape[-1]])


def chebyshev_polynomial_t_add(
    a: ChebyshevPolynomialT,
    b,
) -> ChebyshevPolynomialT:
    """Add two Chebyshev series.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        First series.
    b : ChebyshevPolynomialT, Tensor or Number
        Second series. A scalar is added to the T_0 coefficient.

    Returns
    -------
    ChebyshevPolynomialT
        Sum a + b.

    Raises
    ------
    VariableMismatchError
        If a and b have different variables.

    Notes
    -----
    If the series have different degrees, the shorter one is zero-padded.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0, 2.0]))
    >>> b = chebyshev_polynomial_t(torch.tensor([3.0, 4.0, 5.0]))
    >>> c = chebyshev_polynomial_t_add(a, b)
    >>> c.coeffs
    tensor([4., 6., 5.])
    """
    if isinstance(b, (Tensor, Number)):
        b = chebyshev_polynomial_t(b, a.var)

    check_same_variable(a, b)

    n = max(a.coeffs.shape[-1], b.coeffs.shape[-1])

    return chebyshev_polynomial_t(
        _pad_to(a.coeffs, n) + _pad_to(b.coeffs, n), a.var
    )
