"""
Example: Hooke–Jeeves pattern search

Three small problems solved without derivatives:

1. a convex bowl in 2D and 3D,
2. the Rosenbrock valley with a fixed iteration budget,
3. a constrained problem handled through an increasing penalty coefficient.
"""

import numpy as np

from patternsearch import (
    SearchConfig,
    geometric_schedule,
    run_search,
    search_2d,
    search_3d,
    search_with_n_2d,
    search_with_penalty_2d,
)


def bowl(x: np.ndarray) -> float:
    return float(np.sum(x**2))


def rosenbrock(x: np.ndarray) -> float:
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def example_bowl():
    """Example: minimum of sum of squares."""
    print("=" * 60)
    print("Example 1: Convex bowl")
    print("=" * 60)

    x2 = search_2d(np.array([5.0, 5.0]), 1.0, 1e-6, bowl)
    x3 = search_3d(np.array([5.0, -3.0, 2.5]), 1.0, 1e-6, bowl)
    print(f"2D minimum: {x2}, f = {bowl(x2):.3e}")
    print(f"3D minimum: {x3}, f = {bowl(x3):.3e}")
    print()


def example_rosenbrock():
    """Example: Rosenbrock valley with a bounded number of iterations."""
    print("=" * 60)
    print("Example 2: Rosenbrock valley")
    print("=" * 60)

    x0 = np.array([-1.2, 1.0])
    x = search_with_n_2d(x0, 0.5, 2000, rosenbrock)
    print(f"Start: {x0}, f = {rosenbrock(x0):.4f}")
    print(f"After 2000 iterations: {x}, f = {rosenbrock(x):.3e}")

    res = run_search(SearchConfig(init_step=0.5, n=2000), rosenbrock, x0)
    print(f"Objective evaluations: {res.nfev}")
    print()


def example_penalty():
    """Example: minimize (x - 2)^2 + (y - 2)^2 subject to x <= 1."""
    print("=" * 60)
    print("Example 3: Penalty method for x <= 1")
    print("=" * 60)

    def objective(x: np.ndarray, c: float) -> float:
        violation = max(0.0, x[0] - 1.0)
        return float((x[0] - 2.0) ** 2 + (x[1] - 2.0) ** 2 + c * violation**2)

    x = search_with_penalty_2d(
        np.array([0.0, 0.0]), 1.0, 1e-6, objective, geometric_schedule(1.0, 2.0)
    )
    print(f"Constrained minimum: {x} (expected [1. 2.])")
    print(f"Constraint x <= 1 satisfied: {x[0] <= 1.0 + 1e-6}")
    print()


def main():
    example_bowl()
    example_rosenbrock()
    example_penalty()
    print("All pattern search examples completed.")


if __name__ == "__main__":
    main()
