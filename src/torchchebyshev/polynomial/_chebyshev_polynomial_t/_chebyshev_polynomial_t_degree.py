import torch
from torch import Tensor

from ._chebyshev_polynomial_t import ChebyshevPolynomialT


def chebyshev_polynomial_t_degree(c: ChebyshevPolynomialT) -> Tensor:
    """Index of the highest Chebyshev term of ``c``.

    Construction strips trailing zeros, so this is the true degree. The zero
    series has a single coefficient and reports 0.

    Examples
    --------
    >>> chebyshev_polynomial_t_degree(chebyshev_polynomial_t([1.0, 2.0, 3.0]))
    tensor(2)
    """
    return torch.tensor(len(c.coeffs) - 1, device=c.coeffs.device)
