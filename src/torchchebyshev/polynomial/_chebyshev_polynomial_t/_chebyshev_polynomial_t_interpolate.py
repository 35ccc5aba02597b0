from typing import Callable, Optional

import torch

from .._coefficients import DEFAULT_VARIABLE
from ._chebyshev_polynomial_t import ChebyshevPolynomialT
from ._chebyshev_polynomial_t_fit import chebyshev_polynomial_t_fit
from ._chebyshev_polynomial_t_points import chebyshev_polynomial_t_points


def chebyshev_polynomial_t_interpolate(
    f: Callable,
    n: int,
    dtype: Optional[torch.dtype] = None,
    device: torch.device | str = "cpu",
    var: str = DEFAULT_VARIABLE,
) -> ChebyshevPolynomialT:
    """Degree ``n - 1`` interpolant of ``f`` on the Chebyshev points.

    ``f`` is called once with the tensor of ``n`` first-kind nodes and must
    return a tensor of the same shape.

    Parameters
    ----------
    f : Callable
        Function to interpolate, Tensor -> Tensor.
    n : int
        Number of nodes; the interpolant has degree ``n - 1``.
    dtype : torch.dtype, optional
        Dtype of the nodes. Default is ``torch.get_default_dtype()``.
    device : torch.device or str, optional
        Device of the nodes. Default is "cpu".
    var : str, optional
        Variable label of the result. Default is ``"x"``.

    Returns
    -------
    ChebyshevPolynomialT
        Series that agrees with ``f`` at every node.

    Examples
    --------
    >>> c = chebyshev_polynomial_t_interpolate(torch.cos, 8, torch.float64)
    >>> float(chebyshev_polynomial_t_evaluate(c, 0.3) - math.cos(0.3)) < 1e-8
    True
    """
    nodes = chebyshev_polynomial_t_points(n, dtype=dtype, device=device)

    return chebyshev_polynomial_t_fit(nodes, f(nodes), n - 1, var)
