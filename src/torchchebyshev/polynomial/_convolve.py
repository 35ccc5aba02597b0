import torch
from torch import Tensor


def convolve(a: Tensor, b: Tensor) -> Tensor:
    """Full discrete convolution of two 1-D tensors.

    Equivalent to multiplying the polynomials whose ascending coefficients
    are ``a`` and ``b``. Built from an outer product and ``index_add`` so it
    stays differentiable and runs on any device.

    Parameters
    ----------
    a, b : Tensor
        1-D tensors of lengths ``n_a`` and ``n_b``.

    Returns
    -------
    Tensor
        Convolution of length ``n_a + n_b - 1`` in the promoted dtype.

    Examples
    --------
    >>> convolve(torch.tensor([1.0, 2.0]), torch.tensor([1.0, 3.0]))
    tensor([1., 5., 6.])
    """
    dtype = torch.promote_types(a.dtype, b.dtype)
    a = a.to(dtype)
    b = b.to(dtype)

    n_a = a.shape[-1]
    n_b = b.shape[-1]

    outer = a.unsqueeze(-1) * b.unsqueeze(-2)

    index = (
        torch.arange(n_a, device=a.device).unsqueeze(-1)
        + torch.arange(n_b, device=a.device).unsqueeze(-2)
    ).reshape(-1)

    result = torch.zeros(n_a + n_b - 1, dtype=dtype, device=a.device)

    return result.index_add(0, index, outer.reshape(-1))
