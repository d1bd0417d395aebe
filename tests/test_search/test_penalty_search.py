import numpy as np

from patternsearch import (
    constant_schedule,
    geometric_schedule,
    hooke_jeeves,
    search,
    search_with_penalty,
    search_with_penalty_2d,
    search_with_penalty_and_n,
)


def test_coefficient_fixed_within_each_iteration():
    seen = []
    coef_calls = []

    def f(x: np.ndarray, c: float) -> float:
        seen.append(c)
        return float(np.sum(x**2) + c * max(0.0, 1.0 - x[0]) ** 2)

    def coef(count: int) -> float:
        coef_calls.append(count)
        return float(count)

    res = hooke_jeeves(f, [5.0, 5.0], 1.0, n=12, coef=coef, history=True)
    assert coef_calls == list(range(1, 13))
    assert res.coef_history == [float(k) for k in range(1, 13)]
    # Coefficients only ever step forward, and every iteration evaluates.
    assert seen == sorted(seen)
    assert set(seen) == {float(k) for k in range(1, 13)}


def test_eps_penalty_counts_every_iteration():
    coef_calls = []

    def coef(count: int) -> float:
        coef_calls.append(count)
        return 1.0

    res = hooke_jeeves(
        lambda x, c: float(c * np.sum(x**2)), [3.0, -2.0], 1.0, eps=1e-4, coef=coef
    )
    assert coef_calls == list(range(1, res.nit + 1))


def test_zero_penalty_matches_plain_search(bowl):
    x0 = np.array([5.0, -3.0])

    def f(x: np.ndarray, c: float) -> float:
        return bowl(x) + c * x[0]

    plain = search(x0, 1.0, 1e-6, bowl)
    penalized = search_with_penalty(x0, 1.0, 1e-6, f, constant_schedule(0.0))
    assert np.array_equal(plain, penalized)


def test_penalty_search_enforces_axis_constraint():
    # minimize (x0 - 2)^2 + (x1 - 2)^2 subject to x0 <= 1
    def f(x: np.ndarray, c: float) -> float:
        violation = max(0.0, x[0] - 1.0)
        return float((x[0] - 2.0) ** 2 + (x[1] - 2.0) ** 2 + c * violation**2)

    x = search_with_penalty_2d(
        np.array([0.0, 0.0]), 1.0, 1e-6, f, geometric_schedule(1.0, 2.0)
    )
    assert np.allclose(x, [1.0, 2.0], atol=1e-4)


def test_penalty_and_n_runs_exact_iterations():
    calls = []

    def coef(count: int) -> float:
        calls.append(count)
        return 2.0 * count

    search_with_penalty_and_n(
        [1.0, 1.0, 1.0], 0.5, 9, lambda x, c: float(np.sum((x - c) ** 2)), coef
    )
    assert calls == list(range(1, 10))


def test_penalty_result_uses_last_coefficient():
    res = hooke_jeeves(
        lambda x, c: float(np.sum(x**2) + c),
        [1.0, 1.0],
        1.0,
        n=5,
        coef=lambda count: 100.0 * count,
    )
    assert res.fun == float(np.sum(res.x**2) + 500.0)
