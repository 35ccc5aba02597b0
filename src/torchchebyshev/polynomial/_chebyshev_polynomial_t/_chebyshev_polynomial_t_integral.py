import warnings

from torch import Tensor

from .._coefficients import as_points
from ._chebyshev_polynomial_t import ChebyshevPolynomialT
from ._chebyshev_polynomial_t_antiderivative import (
    chebyshev_polynomial_t_antiderivative,
)
from ._chebyshev_polynomial_t_evaluate import chebyshev_polynomial_t_evaluate


def _outside(x: Tensor, lower: float, upper: float) -> bool:
    return bool(((x.real < lower) | (x.real > upper)).any())


def chebyshev_polynomial_t_integral(
    a: ChebyshevPolynomialT,
    lower,
    upper,
) -> Tensor:
    """Definite integral of ``a`` from ``lower`` to ``upper``.

    Evaluates the first antiderivative ``F`` (with ``F(0) = 0``) at both
    limits and returns ``F(upper) - F(lower)``. Limits broadcast against
    each other, so tensors of limits give a tensor of integrals.

    Parameters
    ----------
    a : ChebyshevPolynomialT
        Integrand.
    lower, upper : Tensor or Number
        Limits of integration.

    Returns
    -------
    Tensor

    Warns
    -----
    UserWarning
        If either limit lies outside ``ChebyshevPolynomialT.DOMAIN``. The
        value is still computed.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0]))
    >>> chebyshev_polynomial_t_integral(a, -1.0, 1.0)
    tensor(2.)
    """
    lower = as_points(lower, a.coeffs)
    upper = as_points(upper, a.coeffs)

    left, right = ChebyshevPolynomialT.DOMAIN

    if _outside(lower, left, right) or _outside(upper, left, right):
        warnings.warn(
            f"Integration bounds extend outside natural domain "
            f"[{left}, {right}] for ChebyshevPolynomialT",
            stacklevel=2,
        )

    F = chebyshev_polynomial_t_antiderivative(a)

    return chebyshev_polynomial_t_evaluate(
        F, upper
    ) - chebyshev_polynomial_t_evaluate(F, lower)
