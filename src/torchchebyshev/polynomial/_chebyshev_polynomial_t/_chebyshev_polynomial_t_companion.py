import math

import torch
from torch import Tensor

from .._degree_error import DegreeError
from ._chebyshev_polynomial_t import ChebyshevPolynomialT


def chebyshev_polynomial_t_companion(
    c: ChebyshevPolynomialT,
) -> Tensor:
    """Generate scaled companion matrix for Chebyshev T series.

    The eigenvalues of the companion matrix are the roots of the series.

    Parameters
    ----------
    c : ChebyshevPolynomialT
        Chebyshev series of degree >= 1. It is normalized to monic form
        (leading coefficient 1) internally.

    Returns
    -------
    Tensor
        Companion matrix, shape (n, n) where n = degree.

    Raises
    ------
    DegreeError
        If the series has degree < 1.

    Notes
    -----
    From x*T_0 = T_1 and x*T_k = (T_{k-1} + T_{k+1})/2, multiplication by x
    is tridiagonal in the Chebyshev basis. Scaling the basis by
    [1, sqrt(1/2), sqrt(1/2), ...] makes that part symmetric, with
    off-diagonals [sqrt(1/2), 1/2, 1/2, ...], which gives better
    eigenvalues than the unscaled matrix. The monic coefficients, rescaled
    the same way, are subtracted from the last column.

    Examples
    --------
    >>> c = chebyshev_polynomial_t(torch.tensor([0.0, 0.0, 1.0]))  # T_2
    >>> chebyshev_polynomial_t_companion(c)
    tensor([[0.0000, 0.7071],
            [0.7071, 0.0000]])
    """
    coeffs = c.coeffs
    n = coeffs.shape[-1] - 1

    if n < 1:
        raise DegreeError(
            f"Companion matrix requires degree >= 1, got degree {n}"
        )

    if n == 1:
        return (-coeffs[0] / coeffs[1]).reshape(1, 1)

    monic = coeffs / coeffs[-1]

    scl = torch.cat(
        [
            torch.ones(1, dtype=monic.dtype, device=monic.device),
            torch.full(
                (n - 1,), math.sqrt(0.5), dtype=monic.dtype, device=monic.device
            ),
        ]
    )

    # Doubled here, halved with the rest of the matrix below
    off_diagonal = torch.cat(
        [
            torch.full(
                (1,), math.sqrt(2.0), dtype=monic.dtype, device=monic.device
            ),
            torch.ones(n - 2, dtype=monic.dtype, device=monic.device),
        ]
    )

    mat = torch.diag(off_diagonal, 1) + torch.diag(off_diagonal, -1)

    last_column = torch.zeros_like(mat)
    last_column[:, -1] = monic[:-1] * scl / scl[-1]

    return (mat - last_column) / 2
