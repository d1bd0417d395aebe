"""Penalty coefficient schedules for the penalty search variants."""

from __future__ import annotations

import numpy as np

from .core import CoefficientFn


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError("count is 1-indexed and must be >= 1.")


def constant_schedule(value: float) -> CoefficientFn:
    """
    Construct a schedule returning ``value`` at every iteration.

    Raises
    ------
    ValueError
        If value < 0.
    """
    if value < 0:
        raise ValueError("value must be non-negative.")
    value = float(value)

    def coef(count: int) -> float:
        _check_count(count)
        return value

    return coef


def linear_schedule(start: float, slope: float) -> CoefficientFn:
    """
    Construct a linear schedule c_k = start + slope * (k - 1), k = 1, 2, ...

    Parameters
    ----------
    start:
        Coefficient of the first iteration. Must be >= 0.
    slope:
        Increase per iteration. Must be >= 0 so the penalty never relaxes.

    Raises
    ------
    ValueError
        If start < 0 or slope < 0.
    """
    if start < 0:
        raise ValueError("start must be non-negative.")
    if slope < 0:
        raise ValueError("slope must be non-negative.")
    start = float(start)
    slope = float(slope)

    def coef(count: int) -> float:
        _check_count(count)
        return start + slope * (count - 1)

    return coef


def geometric_schedule(start: float, growth: float = 10.0) -> CoefficientFn:
    """
    Construct a geometric schedule c_k = start * growth**(k - 1).

    This is the classic sequential penalty scheme: each outer iteration
    tightens the constraint violation penalty by a constant factor.

    Parameters
    ----------
    start:
        Coefficient of the first iteration. Must be > 0.
    growth:
        Ratio between consecutive coefficients. Must be >= 1.0.

    Raises
    ------
    ValueError
        If start <= 0 or growth < 1.0.
    """
    if start <= 0:
        raise ValueError("start must be positive.")
    if growth < 1.0:
        raise ValueError("growth must be >= 1.0.")
    start = float(start)
    growth = float(growth)

    def coef(count: int) -> float:
        _check_count(count)
        return start * growth ** (count - 1)

    return coef


def sample_schedule(coef: CoefficientFn, num_steps: int) -> np.ndarray:
    """
    Evaluate ``coef`` at iterations 1, ..., num_steps.

    Returns
    -------
    numpy.ndarray
        1D float array of shape (num_steps,).

    Raises
    ------
    ValueError
        If num_steps < 1.
    """
    if num_steps < 1:
        raise ValueError("num_steps must be at least 1.")
    return np.array([coef(k) for k in range(1, num_steps + 1)], dtype=float)


__all__ = [
    "constant_schedule",
    "linear_schedule",
    "geometric_schedule",
    "sample_schedule",
]
