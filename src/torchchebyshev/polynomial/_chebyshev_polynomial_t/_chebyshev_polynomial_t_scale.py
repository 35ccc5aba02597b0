from numbers import Number
from typing import Union

from torch import Tensor

from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_scale(
    a: ChebyshevPolynomialT,
    scalar: Union[Tensor, Number],
) -> ChebyshevPolynomialT:
    """Multiply every coefficient of ``a`` by ``scalar``.

    A zero scalar gives the zero series. Complex scalars promote the
    coefficients to a complex dtype.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0, -2.0]))
    >>> chebyshev_polynomial_t_scale(a, 3.0).coeffs
    tensor([ 3., -6.])
    """
    return chebyshev_polynomial_t(scalar * a.coeffs, a.var)
