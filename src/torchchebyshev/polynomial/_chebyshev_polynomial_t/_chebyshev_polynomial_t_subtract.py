from numbers import Number

from torch import Tensor

from .._variable_mismatch_error import check_same_variable
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_add import _pad_to


def chebyshev_polynomial_t_subtract(
    a: ChebyshevPolynomialT,
    b,
) -> ChebyshevPolynomialT:
    """Subtract two Chebyshev series.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        Minuend.
    b : ChebyshevPolynomialT, Tensor or Number
        Subtrahend. A scalar is subtracted from the T_0 coefficient.

    Returns
    -------
    ChebyshevPolynomialT
        Difference a - b.

    Raises
    ------
    VariableMismatchError
        If a and b have different variables.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0, 2.0, 3.0]))
    >>> b = chebyshev_polynomial_t(torch.tensor([1.0, 2.0]))
    >>> chebyshev_polynomial_t_subtract(a, b).coeffs
    tensor([0., 0., 3.])
    """
    if isinstance(b, (Tensor, Number)):
        b = chebyshev_polynomial_t(b, a.var)

    check_same_variable(a, b)

    n = max(a.coeffs.shape[-1], b.coeffs.shape[-1])

    return chebyshev_polynomial_t(
        _pad_to(a.coeffs, n) - _pad_to(b.coeffs, n), a.var
    )
