from typing import Optional

import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._real_numbers import real_numbers


@hypothesis.strategies.composite
def chebyshev_coefficients(
    draw: hypothesis.strategies.DrawFn,
    min_degree: int = 0,
    max_degree: int = 8,
    dtype: torch.dtype = torch.float64,
    elements: Optional[hypothesis.strategies.SearchStrategy[float]] = None,
    nonzero_leading: bool = True,
) -> torch.Tensor:
    """Generate 1-D coefficient tensors for Chebyshev series.

    With ``nonzero_leading`` the last coefficient is bounded away from zero
    so the drawn degree is the degree of the series.
    """
    degree = draw(
        hypothesis.strategies.integers(min_value=min_degree, max_value=max_degree)
    )

    if elements is None:
        elements = real_numbers()

    arr = draw(
        hypothesis.extra.numpy.arrays(
            numpy.float64, (degree + 1,), elements=elements
        )
    )

    arr = arr.copy()

    if nonzero_leading:
        leading = draw(
            real_numbers(min_value=0.5, max_value=10.0)
        ) * draw(hypothesis.strategies.sampled_from([-1.0, 1.0]))
        arr[-1] = leading

    return torch.tensor(arr, dtype=dtype)
