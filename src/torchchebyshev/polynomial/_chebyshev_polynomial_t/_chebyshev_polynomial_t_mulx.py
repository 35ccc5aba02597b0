import torch

from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_mulx(a: ChebyshevPolynomialT) -> ChebyshevPolynomialT:
    """Product of ``a`` with the monomial ``x``.

    From ``x T_0 = T_1`` and ``x T_k = (T_{k-1} + T_{k+1}) / 2`` for
    ``k >= 1``, each coefficient is split between its two neighbours. The
    result has one more coefficient than ``a`` and no truncation is applied.

    Examples
    --------
    >>> chebyshev_polynomial_t_mulx(chebyshev_polynomial_t([1.0])).coeffs
    tensor([0., 1.])
    >>> chebyshev_polynomial_t_mulx(chebyshev_polynomial_t([0.0, 1.0])).coeffs
    tensor([0.5000, 0.0000, 0.5000])
    """
    coeffs = a.coeffs

    zero = torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device)

    half = 0.5 * coeffs[1:]

    # Shifted up by one: c_0 whole, c_k halved
    up = torch.cat([zero, coeffs[:1], half])

    # Shifted down by one
    down = torch.cat([half, zero, zero])

    return chebyshev_polynomial_t(up + down, a.var)
