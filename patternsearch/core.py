"""Core interfaces shared across the pattern search routines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

import numpy as np

from .diagnostics import check_finite

Array = np.ndarray
Objective = Callable[[Array], float]
PenalizedObjective = Callable[[Array, float], float]
CoefficientFn = Callable[[int], float]
Callback = Callable[[int, Array, float], None]

# Step size multiplier applied after a failed exploration round.
SHRINK_FACTOR = 0.5


@dataclass
class SearchResult:
    """
    Result object returned by :func:`patternsearch.hooke_jeeves`.

    Attributes:
        x: Best point found.
        fun: Objective value at ``x``. Penalty runs report the value under the
            coefficient of the last outer iteration.
        nit: Number of outer iterations performed.
        nfev: Number of objective evaluations, including the final one used
            for ``fun``.
        step: Step size after the last outer iteration.
        success: True when the last exploration round found no improvement,
            i.e. ``x`` is stable at the final step size.
        message: Human-readable termination reason.
        history: Anchor point after every successful pattern move, preceded by
            the starting point (only filled when requested).
        step_history: Step size used by each outer iteration (only filled when
            requested).
        coef_history: Penalty coefficient of each outer iteration (penalty runs
            with history only).
    """

    x: Array
    fun: float
    nit: int
    nfev: int
    step: float
    success: bool
    message: str
    history: List[Array] = field(default_factory=list)
    step_history: List[float] = field(default_factory=list)
    coef_history: List[float] = field(default_factory=list)


class CountingObjective:
    """Wrap an objective, counting evaluations and optionally checking values."""

    def __init__(self, fun: Callable[..., float], check_values: bool = False) -> None:
        self.fun = fun
        self.check_values = check_values
        self.nfev = 0

    def __call__(self, x: Array, *args: Any) -> float:
        self.nfev += 1
        value = self.fun(x, *args)
        if self.check_values:
            check_finite(value, "objective")
        return value


def as_point(x0: Any, dim: Optional[int] = None) -> Array:
    """Return a float copy of ``x0``, validating its shape."""
    x = np.asarray(x0, dtype=float)
    if x.ndim != 1 or x.size == 0:
        raise ValueError(
            f"Starting point must be a non-empty 1-D vector, got shape {x.shape}."
        )
    if dim is not None and x.size != dim:
        raise ValueError(f"Expected a point of dimension {dim}, got {x.size}.")
    return x.copy()


def check_step_size(init_step: float) -> None:
    """Raise ``ValueError`` unless the initial step size is positive."""
    if not init_step > 0:
        raise ValueError("init_step must be positive.")


def check_eps(eps: float) -> None:
    """Raise ``ValueError`` unless the step size threshold is positive."""
    if not eps > 0:
        raise ValueError("eps must be positive.")


def check_count(n: int, name: str = "n") -> None:
    """Raise ``ValueError`` unless ``n`` is a positive integer."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {type(n).__name__}.")
    if n <= 0:
        raise ValueError(f"{name} must be positive.")


__all__ = [
    "Array",
    "Objective",
    "PenalizedObjective",
    "CoefficientFn",
    "Callback",
    "SHRINK_FACTOR",
    "SearchResult",
    "CountingObjective",
    "as_point",
    "check_step_size",
    "check_eps",
    "check_count",
]
