import numpy as np

from patternsearch import explore_around


def recording(fun):
    calls = []

    def f(x: np.ndarray) -> float:
        calls.append(np.array(x, dtype=float))
        return fun(x)

    return f, calls


def test_explore_finds_improvement_on_bowl(bowl):
    result = explore_around(np.array([5.0, 5.0]), 1.0, bowl)
    assert result is not None
    assert np.allclose(result, [4.0, 4.0])


def test_explore_accumulates_moves_across_axes(bowl):
    f, calls = recording(bowl)
    explore_around(np.array([5.0, 5.0]), 1.0, f)
    expected = [[5, 5], [6, 5], [4, 5], [4, 6], [4, 4]]
    assert len(calls) == len(expected)
    for call, point in zip(calls, expected):
        assert np.allclose(call, point)


def test_explore_keeps_original_coordinate_when_axis_does_not_help():
    def fun(x: np.ndarray) -> float:
        return float(x[0] ** 2 + (x[1] - 10.0) ** 2)

    result = explore_around(np.array([0.0, 0.0]), 1.0, fun)
    assert result is not None
    assert np.array_equal(result, [0.0, 1.0])


def test_explore_reports_no_improvement_at_local_optimum(bowl):
    assert explore_around(np.array([0.0, 0.0]), 0.5, bowl) is None
    assert explore_around(np.array([0.1, 0.0]), 1.0, bowl) is None


def test_explore_decrement_probe_is_evaluated_fresh():
    def fun(x: np.ndarray) -> float:
        return float((x[0] + 3.0) ** 2)

    f, calls = recording(fun)
    result = explore_around(np.array([0.0]), 1.0, f)
    assert result is not None
    assert np.array_equal(result, [-1.0])
    assert [float(c[0]) for c in calls] == [0.0, 1.0, -1.0]


def test_explore_ties_are_not_improvements():
    assert explore_around(np.array([1.0, 2.0, 3.0]), 0.25, lambda x: 7.0) is None


def test_explore_nan_objective_never_improves():
    assert explore_around(np.array([1.0, 1.0]), 1.0, lambda x: float("nan")) is None


def test_explore_does_not_modify_input(bowl):
    x = np.array([3.0, -2.0, 1.0])
    original = x.copy()
    result = explore_around(x, 1.0, bowl)
    assert np.array_equal(x, original)
    assert result is not None
    assert result is not x


def test_explore_evaluation_count_is_bounded(bowl, rng):
    x = rng.normal(size=5)
    f, calls = recording(bowl)
    explore_around(x, 0.1, f)
    assert 1 + 5 <= len(calls) <= 1 + 2 * 5
