"""Pattern moves: extrapolate along a direction while it keeps paying off."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import Array, Objective, check_count
from .explore import explore_around
from .logging import get_logger

logger = get_logger(__name__)


def pattern_move(
    x: Array,
    nextx: Array,
    per: float,
    f: Objective,
    max_advances: Optional[int] = None,
) -> Array:
    """Advance from ``x`` through ``nextx`` for as long as it improves.

    Each pass reflects ``x`` through ``nextx`` (``farx = 2 * nextx - x``),
    explores around ``farx`` at step ``per`` and keeps the explored point if it
    is better. If ``farx`` is not strictly better than ``x`` the advance stops
    and ``nextx`` becomes the new anchor; otherwise the window shifts to
    ``(nextx, farx)`` and the pass repeats. Ties therefore stop the advance,
    as does a NaN objective value.

    The loop has no built-in bound. ``max_advances`` caps the number of window
    shifts; once reached the last improving point is returned.

    Parameters
    ----------
    x:
        Previously accepted point.
    nextx:
        Point at least as good as ``x``, usually from :func:`explore_around`.
    per:
        Step size for the re-exploration around each extrapolated point.
    f:
        Objective to minimize.
    max_advances:
        Optional positive cap on the number of window shifts.

    Returns
    -------
    numpy.ndarray
        The new anchor point. The inputs are not modified.
    """
    if max_advances is not None:
        check_count(max_advances, "max_advances")

    x = np.asarray(x, dtype=float).copy()
    nextx = np.asarray(nextx, dtype=float).copy()
    advances = 0

    while True:
        farx = 2.0 * nextx - x
        explored = explore_around(farx, per, f)
        if explored is not None:
            farx = explored

        if not f(farx) < f(x):
            return nextx

        x, nextx = nextx, farx
        advances += 1
        if max_advances is not None and advances >= max_advances:
            logger.warning(
                "Pattern move stopped after %d advances (max_advances reached).",
                advances,
            )
            return nextx


__all__ = ["pattern_move"]
