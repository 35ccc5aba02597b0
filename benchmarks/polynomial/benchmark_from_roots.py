"""Benchmark constructing Chebyshev series from roots.

Compares the pairwise (balanced tree) product used by
``chebyshev_polynomial_t_from_roots`` against multiplying the linear
factors into an accumulator one at a time.
"""

import time

import torch

from torchchebyshev.polynomial import (
    chebyshev_polynomial_t,
    chebyshev_polynomial_t_evaluate,
    chebyshev_polynomial_t_from_roots,
    chebyshev_polynomial_t_multiply,
)


def _from_roots_sequential(roots: torch.Tensor):
    result = chebyshev_polynomial_t(torch.ones(1, dtype=roots.dtype))

    for r in roots:
        factor = chebyshev_polynomial_t(torch.stack([-r, torch.ones_like(r)]))
        result = chebyshev_polynomial_t_multiply(result, factor)

    return result


def benchmark_from_roots(
    n_roots: int, n_iterations: int = 20, method: str = "balanced"
) -> float:
    """Benchmark series construction from ``n_roots`` roots.

    Parameters
    ----------
    n_roots : int
        Number of roots.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'balanced' or 'sequential'.

    Returns
    -------
    float
        Average time per construction in milliseconds.
    """
    if method == "balanced":
        fn = chebyshev_polynomial_t_from_roots
    elif method == "sequential":
        fn = _from_roots_sequential
    else:
        raise ValueError(f"Unknown method: {method}")

    roots = torch.cos(
        torch.pi * (torch.arange(n_roots, dtype=torch.float64) + 0.5) / n_roots
    )

    # Warmup
    for _ in range(3):
        _ = fn(roots)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = fn(roots)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def max_residual(n_roots: int, method: str = "balanced") -> float:
    """Largest |c(r_i)| over the roots for the constructed series."""
    roots = torch.cos(
        torch.pi * (torch.arange(n_roots, dtype=torch.float64) + 0.5) / n_roots
    )

    if method == "balanced":
        c = chebyshev_polynomial_t_from_roots(roots)
    else:
        c = _from_roots_sequential(roots)

    return chebyshev_polynomial_t_evaluate(c, roots).abs().max().item()


def main():
    """Run from-roots benchmarks across root counts."""
    sizes = [4, 8, 16, 32, 64, 128]

    print("Chebyshev Series From Roots Benchmark")
    print("=" * 70)
    print(
        f"{'Roots':>8} {'Balanced (ms)':>16} {'Sequential (ms)':>16} "
        f"{'Balanced res':>14} {'Sequential res':>14}"
    )
    print("-" * 70)

    for n in sizes:
        ms_balanced = benchmark_from_roots(n, method="balanced")
        ms_sequential = benchmark_from_roots(n, method="sequential")

        print(
            f"{n:>8} {ms_balanced:>16.4f} {ms_sequential:>16.4f} "
            f"{max_residual(n, 'balanced'):>14.2e} "
            f"{max_residual(n, 'sequential'):>14.2e}"
        )

    print()
    print("Notes:")
    print("- Balanced: log2(n) rounds of pairwise products")
    print("- Sequential: n products against a growing accumulator")


if __name__ == "__main__":
    main()
