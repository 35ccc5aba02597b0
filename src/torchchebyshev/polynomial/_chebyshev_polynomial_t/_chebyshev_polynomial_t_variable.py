from typing import Optional

import torch

from .._coefficients import DEFAULT_VARIABLE
from ._chebyshev_polynomial_t import (
    ChebyshevPolynomialT,
    chebyshev_polynomial_t,
)


def chebyshev_polynomial_t_variable(
    var: str = DEFAULT_VARIABLE,
    dtype: Optional[torch.dtype] = None,
    device: torch.device | str = "cpu",
) -> ChebyshevPolynomialT:
    """Return the formal variable ``x`` as a Chebyshev series.

    Since T_1(x) = x, this is the series with coefficients [0, 1].

    Examples
    --------
    >>> chebyshev_polynomial_t_variable().coeffs
    tensor([0., 1.])
    """
    return chebyshev_polynomial_t(
        torch.tensor([0.0, 1.0], dtype=dtype, device=device), var
    )
