import numpy as np
import pytest

from patternsearch.schedules import (
    constant_schedule,
    geometric_schedule,
    linear_schedule,
    sample_schedule,
)


def test_constant_schedule():
    coef = constant_schedule(3.5)
    assert coef(1) == 3.5
    assert coef(100) == 3.5


def test_linear_schedule_starts_at_first_iteration():
    coef = linear_schedule(1.0, 0.5)
    assert coef(1) == 1.0
    assert coef(2) == 1.5
    assert coef(11) == 6.0


def test_geometric_schedule():
    coef = geometric_schedule(2.0, 10.0)
    assert coef(1) == 2.0
    assert coef(2) == 20.0
    assert coef(4) == pytest.approx(2000.0)


def test_sample_schedule_shape_and_monotonicity():
    values = sample_schedule(geometric_schedule(1.0, 2.0), 6)
    assert values.shape == (6,)
    assert np.allclose(values, [1.0, 2.0, 4.0, 8.0, 16.0, 32.0])
    assert np.all(np.diff(values) >= 0)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: constant_schedule(1.0),
        lambda: linear_schedule(1.0, 1.0),
        lambda: geometric_schedule(1.0, 2.0),
    ],
)
def test_schedules_reject_zero_count(factory):
    coef = factory()
    with pytest.raises(ValueError, match="1-indexed"):
        coef(0)


def test_invalid_schedule_arguments():
    with pytest.raises(ValueError):
        constant_schedule(-1.0)
    with pytest.raises(ValueError):
        linear_schedule(-1.0, 1.0)
    with pytest.raises(ValueError):
        linear_schedule(1.0, -0.1)
    with pytest.raises(ValueError):
        geometric_schedule(0.0, 2.0)
    with pytest.raises(ValueError):
        geometric_schedule(1.0, 0.5)
    with pytest.raises(ValueError):
        sample_schedule(constant_schedule(1.0), 0)
