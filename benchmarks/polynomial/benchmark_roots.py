"""Benchmark Chebyshev series root finding.

Times the companion matrix construction on its own and the full root
computation (companion matrix plus eigenvalue solve) across degrees.
"""

import time

import torch

from torchchebyshev.polynomial import (
    chebyshev_polynomial_t,
    chebyshev_polynomial_t_companion,
    chebyshev_polynomial_t_roots,
)


def benchmark_roots(
    degree: int, n_iterations: int = 10, method: str = "roots"
) -> float:
    """Benchmark root finding at given degree.

    Parameters
    ----------
    degree : int
        Degree of series (number of roots to find).
    n_iterations : int
        Number of iterations for timing.
    method : str
        'companion' to time only the matrix construction, or 'roots'.

    Returns
    -------
    float
        Average time per call in milliseconds.
    """
    if method == "companion":
        fn = chebyshev_polynomial_t_companion
    elif method == "roots":
        fn = chebyshev_polynomial_t_roots
    else:
        raise ValueError(f"Unknown method: {method}")

    coeffs = torch.randn(degree + 1, dtype=torch.float64)
    coeffs[-1] = 1.0
    c = chebyshev_polynomial_t(coeffs)

    # Warmup
    for _ in range(3):
        _ = fn(c)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = fn(c)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run root finding benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256, 512]

    print("Chebyshev Series Root Finding Benchmark")
    print("=" * 50)
    print(f"{'Degree':>8} {'Companion (ms)':>18} {'Roots (ms)':>18}")
    print("-" * 50)

    for degree in degrees:
        ms_companion = benchmark_roots(degree, method="companion")
        ms_roots = benchmark_roots(degree, method="roots")

        print(f"{degree:>8} {ms_companion:>18.4f} {ms_roots:>18.4f}")

    print()
    print("Notes:")
    print("- Companion: O(n^2) dense matrix construction")
    print("- Roots: O(n^3) dominated by the eigenvalue decomposition")


if __name__ == "__main__":
    main()
