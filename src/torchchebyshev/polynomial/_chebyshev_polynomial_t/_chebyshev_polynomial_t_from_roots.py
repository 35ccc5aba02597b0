import torch

from .._coefficients import DEFAULT_VARIABLE
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)
from ._chebyshev_polynomial_t_multiply import chebyshev_polynomial_t_multiply
from ._chebyshev_polynomial_t_truncate import chebyshev_polynomial_t_truncate


def chebyshev_polynomial_t_from_roots(
    roots,
    var: str = DEFAULT_VARIABLE,
) -> ChebyshevPolynomialT:
    """Construct monic Chebyshev series from its roots.

    The resulting series is (x - r_0)(x - r_1)...(x - r_{n-1}).

    Parameters
    ----------
    roots : Tensor or sequence
        Roots of the polynomial, shape (n,). Real or complex.
    var : str, optional
        Variable label. Default is ``"x"``.

    Returns
    -------
    ChebyshevPolynomialT
        Chebyshev series with the given roots and leading power-basis
        coefficient 1.

    Notes
    -----
    Since x = T_1 and constants are T_0, each linear factor is
    (x - r) = -r*T_0 + T_1. The factors are multiplied pairwise, halving
    the list on every round, with an odd leftover folded into the first
    product. This takes O(log n) rounds instead of n - 1 sequential
    products and keeps intermediate factors balanced in degree.

    Examples
    --------
    >>> roots = torch.tensor([0.5, -0.5])
    >>> chebyshev_polynomial_t_from_roots(roots).coeffs
    tensor([0.2500, 0.0000, 0.5000])
    """
    roots = torch.as_tensor(roots)

    if not (roots.is_floating_point() or roots.is_complex()):
        roots = roots.to(torch.get_default_dtype())

    roots = roots.reshape(-1)

    one = torch.ones((), dtype=roots.dtype, device=roots.device)

    if roots.shape[0] == 0:
        return chebyshev_polynomial_t(one.reshape(1), var)

    p = [chebyshev_polynomial_t(torch.stack([-r, one]), var) for r in roots]

    n = len(p)

    while n > 1:
        m, r = divmod(n, 2)

        tmp = [chebyshev_polynomial_t_multiply(p[i], p[i + m]) for i in range(m)]

        if r > 0:
            tmp[0] = chebyshev_polynomial_t_multiply(tmp[0], p[-1])

        p = tmp
        n = m

    return chebyshev_polynomial_t_truncate(p[0])
