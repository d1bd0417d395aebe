"""Hooke–Jeeves search drivers.

The driver alternates exploratory rounds with pattern moves. A successful
exploration resets the step size to its initial value and hands over to
:func:`~patternsearch.pattern.pattern_move`; a failed one halves it. The run
ends once the step size drops to ``eps`` or after ``n`` outer iterations.

Penalty variants take an objective ``f(x, c)`` and a coefficient function
``coef(count)``. The coefficient is computed once per outer iteration (count
starts at 1) and fixed for every evaluation within that iteration.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .core import (
    SHRINK_FACTOR,
    Array,
    Callback,
    CoefficientFn,
    CountingObjective,
    Objective,
    PenalizedObjective,
    SearchResult,
    as_point,
    check_count,
    check_eps,
    check_step_size,
)
from .diagnostics import is_debug_enabled
from .explore import explore_around
from .logging import get_logger
from .pattern import pattern_move

logger = get_logger(__name__)


def _with_coefficient(fun: CountingObjective, value: float) -> Objective:
    def bound(x: Array) -> float:
        return fun(x, value)

    return bound


def hooke_jeeves(
    fun: Callable[..., float],
    x0: Array,
    init_step: float = 1.0,
    eps: Optional[float] = None,
    n: Optional[int] = None,
    coef: Optional[CoefficientFn] = None,
    max_advances: Optional[int] = None,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> SearchResult:
    """Minimize ``fun`` from ``x0`` with the Hooke–Jeeves pattern search.

    Parameters
    ----------
    fun:
        Objective ``fun(x)``, or ``fun(x, c)`` when ``coef`` is given.
    x0:
        Starting point (1-D array-like). Copied, never modified.
    init_step:
        Initial step size; also the value restored after every successful
        exploration.
    eps:
        Stop once the step size is no longer above ``eps``.
    n:
        Run exactly ``n`` outer iterations. Exactly one of ``eps`` and ``n``
        must be given.
    coef:
        Penalty coefficient as a function of the 1-indexed outer iteration.
    max_advances:
        Optional cap forwarded to :func:`pattern_move`.
    callback:
        Called as ``callback(nit, x, per)`` after every outer iteration.
    history:
        Record accepted points and per-iteration step sizes and coefficients.

    Returns
    -------
    SearchResult

    Raises
    ------
    ValueError
        On a non-positive ``init_step``, ``eps``, ``n`` or ``max_advances``,
        when both or neither of ``eps`` and ``n`` are given, or when ``x0`` is
        not a non-empty vector. Raised before ``fun`` is ever called.
    """
    if (eps is None) == (n is None):
        raise ValueError("Exactly one of eps or n must be given.")
    check_step_size(init_step)
    if eps is not None:
        check_eps(eps)
    else:
        check_count(n, "n")
    if max_advances is not None:
        check_count(max_advances, "max_advances")
    x = as_point(x0)

    counted = CountingObjective(fun, check_values=is_debug_enabled())
    init_step = float(init_step)
    per = init_step
    nit = 0
    stable = False
    value: Optional[float] = None
    hist: list[np.ndarray] = []
    step_hist: list[float] = []
    coef_hist: list[float] = []
    if history:
        hist.append(x.copy())

    logger.info(
        "Starting pattern search: dim=%d init_step=%g %s penalty=%s",
        x.size,
        init_step,
        f"eps={eps:g}" if eps is not None else f"n={n}",
        coef is not None,
    )

    while (per > eps) if eps is not None else (nit < n):
        nit += 1
        if coef is None:
            f = counted
        else:
            value = coef(nit)
            f = _with_coefficient(counted, value)
            if history:
                coef_hist.append(value)
        if history:
            step_hist.append(per)

        nextx = explore_around(x, per, f)
        if nextx is not None:
            per = init_step
            x = pattern_move(x, nextx, per, f, max_advances=max_advances)
            stable = False
            if history:
                hist.append(x.copy())
        else:
            per *= SHRINK_FACTOR
            stable = True

        logger.debug("iteration %d: per=%g x=%s", nit, per, x)
        if callback is not None:
            callback(nit, x.copy(), per)

    if coef is None:
        fx = counted(x)
    else:
        if value is None:
            value = coef(1)
        fx = counted(x, value)

    if eps is not None:
        message = "Step size fell below eps."
        # A run that starts with init_step <= eps never explores.
        success = stable or nit == 0
    else:
        message = "Iteration budget exhausted."
        success = stable

    logger.info(
        "Pattern search finished after %d iterations and %d evaluations: f=%g",
        nit,
        counted.nfev,
        fx,
    )
    return SearchResult(
        x=x,
        fun=float(fx),
        nit=nit,
        nfev=counted.nfev,
        step=per,
        success=success,
        message=message,
        history=hist,
        step_history=step_hist,
        coef_history=coef_hist,
    )


def search(x0: Array, init_step: float, eps: float, f: Objective) -> Array:
    """Minimize ``f`` until the step size drops to ``eps``; return the point."""
    return hooke_jeeves(f, x0, init_step=init_step, eps=eps).x


def search_with_n(x0: Array, init_step: float, n: int, f: Objective) -> Array:
    """Minimize ``f`` for exactly ``n`` outer iterations; return the point."""
    return hooke_jeeves(f, x0, init_step=init_step, n=n).x


def search_with_penalty(
    x0: Array,
    init_step: float,
    eps: float,
    f: PenalizedObjective,
    coef: CoefficientFn,
) -> Array:
    """Minimize ``f(x, coef(count))`` until the step size drops to ``eps``.

    ``count`` is the 1-indexed outer iteration, so increasing schedules give
    the usual sequential penalty method.
    """
    return hooke_jeeves(f, x0, init_step=init_step, eps=eps, coef=coef).x


def search_with_penalty_and_n(
    x0: Array,
    init_step: float,
    n: int,
    f: PenalizedObjective,
    coef: CoefficientFn,
) -> Array:
    """Minimize ``f(x, coef(count))`` for exactly ``n`` outer iterations."""
    return hooke_jeeves(f, x0, init_step=init_step, n=n, coef=coef).x


__all__ = [
    "hooke_jeeves",
    "search",
    "search_with_n",
    "search_with_penalty",
    "search_with_penalty_and_n",
]
