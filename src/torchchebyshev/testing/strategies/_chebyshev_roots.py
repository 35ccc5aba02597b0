import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._chebyshev_domain import chebyshev_domain


@hypothesis.strategies.composite
def chebyshev_roots(
    draw: hypothesis.strategies.DrawFn,
    min_size: int = 1,
    max_size: int = 6,
    min_separation: float = 0.1,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """Generate well separated real roots inside the Chebyshev domain."""
    size = draw(
        hypothesis.strategies.integers(min_value=min_size, max_value=max_size)
    )

    arr = draw(
        hypothesis.extra.numpy.arrays(
            numpy.float64,
            (size,),
            elements=chebyshev_domain(),
            unique=True,
        )
    )

    arr = numpy.sort(arr)

    hypothesis.assume(
        size < 2 or bool(numpy.min(numpy.diff(arr)) >= min_separation)
    )

    return torch.tensor(arr, dtype=dtype)
