"""Z-series representation of Chebyshev series.

A Chebyshev series c_0 T_0 + ... + c_n T_n is the symmetric Laurent
series in z = exp(i theta) obtained from T_k(cos theta) = (z^k + z^-k)/2.
Its coefficient array has length 2n + 1 and is symmetric about the centre,
and products and quotients of Chebyshev series become ordinary products and
quotients of these arrays.
"""

from typing import Tuple

import torch
from torch import Tensor


def chebyshev_polynomial_t_to_zseries(coeffs: Tensor) -> Tensor:
    """Convert Chebyshev coefficients to a z-series.

    Parameters
    ----------
    coeffs : Tensor
        Chebyshev coefficients, shape (n,).

    Returns
    -------
    Tensor
        Symmetric z-series, shape (2n - 1,).

    Examples
    --------
    >>> chebyshev_polynomial_t_to_zseries(torch.tensor([1.0, 2.0, 3.0]))
    tensor([1.5000, 1.0000, 1.0000, 1.0000, 1.5000])
    """
    n = coeffs.shape[-1]

    dtype = torch.promote_types(coeffs.dtype, torch.get_default_dtype())

    zs = torch.zeros(2 * n - 1, dtype=dtype, device=coeffs.device)
    zs = torch.cat([zs[: n - 1], coeffs.to(dtype) / 2])

    return zs + zs.flip(-1)


def zseries_to_chebyshev_polynomial_t(zs: Tensor) -> Tensor:
    """Convert a symmetric z-series back to Chebyshev coefficients.

    Parameters
    ----------
    zs : Tensor
        Symmetric z-series, shape (2n - 1,).

    Returns
    -------
    Tensor
        Chebyshev coefficients, shape (n,).
    """
    n = (zs.shape[-1] + 1) // 2

    cs = zs[n - 1 :]

    return torch.cat([cs[:1], 2 * cs[1:]])


def _zseries_division(z1: Tensor, z2: Tensor) -> Tuple[Tensor, Tensor]:
    """Divide z-series ``z1`` by ``z2``.

    Long division that consumes the symmetric dividend from both ends at
    once. Works on private copies; the inputs are not modified.

    Returns
    -------
    Tuple[Tensor, Tensor]
        (quotient, remainder) as z-series.
    """
    dtype = torch.promote_types(z1.dtype, z2.dtype)

    z1 = z1.to(dtype).clone()
    z2 = z2.to(dtype).clone()

    lc1 = z1.shape[-1]
    lc2 = z2.shape[-1]

    if lc2 == 1:
        return z1 / z2, torch.zeros(1, dtype=dtype, device=z1.device)

    if lc1 < lc2:
        return torch.zeros(1, dtype=dtype, device=z1.device), z1

    dlen = lc1 - lc2

    scl = z2[0].clone()
    z2 = z2 / scl

    quo = torch.zeros(dlen + 1, dtype=dtype, device=z1.device)

    i = 0
    j = dlen

    while i < j:
        r = z1[i].clone()

        quo[i] = r
        quo[dlen - i] = r

        tmp = r * z2

        z1[i : i + lc2] -= tmp
        z1[j : j + lc2] -= tmp

        i += 1
        j -= 1

    r = z1[i].clone()

    quo[i] = r

    z1[i : i + lc2] -= r * z2

    quo = quo / scl

    rem = z1[i + 1 : i - 1 + lc2].clone()

    return quo, rem
