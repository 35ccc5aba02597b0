import torch
from torch import Tensor

from .._coefficients import DEFAULT_VARIABLE
from .._domain_error import DomainError
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_vandermonde import (
    chebyshev_polynomial_t_vandermonde,
)


def chebyshev_polynomial_t_fit(
    x: Tensor,
    y: Tensor,
    degree: int,
    var: str = DEFAULT_VARIABLE,
) -> ChebyshevPolynomialT:
    """Least-squares Chebyshev series through samples ``(x, y)``.

    Minimises ``||V c - y||_2`` over coefficient vectors ``c`` of length
    ``degree + 1`` where ``V`` is the pseudo-Vandermonde matrix of ``x``.
    With ``degree + 1 == len(x)`` and distinct nodes the fit interpolates.

    Parameters
    ----------
    x : Tensor
        Sample points, shape (m,), all in [-1, 1].
    y : Tensor
        Sample values, shape (m,).
    degree : int
        Degree of the fitted series.
    var : str, optional
        Variable label of the result. Default is ``"x"``.

    Returns
    -------
    ChebyshevPolynomialT

    Raises
    ------
    DomainError
        If a sample point lies outside [-1, 1].
    InvalidArgumentError
        If degree is negative.

    Examples
    --------
    >>> x = torch.linspace(-1, 1, 10, dtype=torch.float64)
    >>> chebyshev_polynomial_t_fit(x, x**2, degree=2).coeffs  # (T_0 + T_2)/2
    tensor([5.0000e-01, ..., 5.0000e-01], dtype=torch.float64)
    """
    lower, upper = ChebyshevPolynomialT.DOMAIN

    if bool(((x < lower) | (x > upper)).any()):
        raise DomainError(
            f"Fitting points must be in [{lower}, {upper}] for "
            f"ChebyshevPolynomialT, got values in "
            f"[{float(x.min())}, {float(x.max())}]"
        )

    V = chebyshev_polynomial_t_vandermonde(x, degree)

    solution = torch.linalg.lstsq(V, y.to(V.dtype)[:, None]).solution

    return chebyshev_polynomial_t(solution[:, 0], var)
