import torch

from ._chebyshev_polynomial_t import ChebyshevPolynomialT
from ._chebyshev_polynomial_t_add import _pad_to


def chebyshev_polynomial_t_equal(
    a: ChebyshevPolynomialT,
    b: ChebyshevPolynomialT,
    tol: float = 0.0,
) -> bool:
    """Coefficient-wise comparison of two Chebyshev series.

    Series in different variables never compare equal. Otherwise the
    shorter coefficient vector is zero-padded and every difference must be
    at most ``tol`` in absolute value; the default demands exact equality.

    Examples
    --------
    >>> a = chebyshev_polynomial_t(torch.tensor([1.0, 2.0]))
    >>> b = chebyshev_polynomial_t(torch.tensor([1.0, 2.0 + 1e-9]))
    >>> chebyshev_polynomial_t_equal(a, b, tol=1e-6)
    True
    """
    if a.var != b.var:
        return False

    n = max(len(a.coeffs), len(b.coeffs))

    difference = _pad_to(a.coeffs, n) - _pad_to(b.coeffs, n)

    return bool(torch.all(torch.abs(difference) <= tol))
