import torch

from ._polynomial import Polynomial
from ._polynomial_add import _pad_to


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 0.0,
) -> bool:
    """Check polynomial equality within tolerance.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison.

    Returns
    -------
    bool
        True if the variables match and every coefficient differs by at
        most ``tol``.
    """
    if p.var != q.var:
        return False

    n = max(p.coeffs.shape[-1], q.coeffs.shape[-1])

    diff = torch.abs(_pad_to(p.coeffs, n) - _pad_to(q.coeffs, n))

    return bool(diff.max() <= tol)
