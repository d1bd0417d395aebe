"""Benchmark the fixed-dimension pattern search entry points."""

import time
from typing import Callable, Dict

import numpy as np

from patternsearch import hooke_jeeves


def bowl(x: np.ndarray) -> float:
    return float(np.sum(x**2))


def rosenbrock(x: np.ndarray) -> float:
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def benchmark_search(
    fun: Callable[[np.ndarray], float],
    dim: int,
    n_runs: int = 20,
    eps: float = 1e-6,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark eps-terminated searches from random starting points.

    Args:
        fun: Objective to minimize.
        dim: Dimension of the starting points.
        n_runs: Number of independent runs.
        eps: Step size threshold.
        seed: Seed for the starting points.

    Returns:
        Dictionary with timing and evaluation counts.
    """
    rng = np.random.default_rng(seed)
    starts = rng.uniform(-5.0, 5.0, size=(n_runs, dim))

    # Warmup
    hooke_jeeves(fun, starts[0], 1.0, eps=1e-2)

    nfev = 0
    nit = 0
    start = time.perf_counter()
    for x0 in starts:
        res = hooke_jeeves(fun, x0, 1.0, eps=eps)
        nfev += res.nfev
        nit += res.nit
    end = time.perf_counter()

    total_time = end - start
    return {
        "dim": dim,
        "n_runs": n_runs,
        "total_time_sec": total_time,
        "time_per_run_sec": total_time / n_runs,
        "evals_per_run": nfev / n_runs,
        "iterations_per_run": nit / n_runs,
    }


if __name__ == "__main__":
    print("Benchmarking pattern search...")

    for name, fun in (("bowl", bowl), ("rosenbrock", rosenbrock)):
        for dim in (2, 3):
            results = benchmark_search(fun, dim)
            print(f"{name} ({dim}D, {results['n_runs']} runs):")
            print(f"  Time per run: {results['time_per_run_sec']*1e3:.2f} ms")
            print(f"  Evaluations per run: {results['evals_per_run']:.0f}")
            print(f"  Outer iterations per run: {results['iterations_per_run']:.0f}")
