import math
from typing import Optional

import torch
from torch import Tensor


def chebyshev_polynomial_t_points(
    n: int,
    dtype: Optional[torch.dtype] = None,
    device: torch.device | str = "cpu",
) -> Tensor:
    """The ``n`` zeros of ``T_n``, largest first.

    ``x_k = cos(pi (2k + 1) / (2n))`` for ``k = 0, ..., n - 1``.

    Parameters
    ----------
    n : int
        Number of nodes.
    dtype : torch.dtype, optional
        Dtype of the result. Default is ``torch.get_default_dtype()``.
    device : torch.device or str, optional
        Device of the result. Default is "cpu".

    Returns
    -------
    Tensor
        Nodes, shape (n,), in descending order.

    Examples
    --------
    >>> chebyshev_polynomial_t_points(3)
    tensor([ 0.8660,  0.0000, -0.8660])
    """
    if dtype is None:
        dtype = torch.get_default_dtype()

    angles = torch.arange(1, 2 * n, 2, dtype=dtype, device=device)

    return torch.cos(angles * (math.pi / (2 * n)))
