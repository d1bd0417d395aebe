"""Exploratory moves: one round of coordinate-wise probing."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import Array, Objective


def explore_around(x: Array, per: float, f: Objective) -> Optional[Array]:
    """Probe every axis of ``x`` by ``+per`` then ``-per``.

    Axes are visited in index order. A probe is accepted when its objective
    value is strictly below the best value seen so far in this round (starting
    from ``f(x)``), and later axes probe from the point as already modified by
    earlier ones. When neither direction helps, the axis keeps its original
    coordinate. Each probe is a fresh objective call.

    Parameters
    ----------
    x:
        Point to explore around. Not modified.
    per:
        Step size applied along each axis.
    f:
        Objective to minimize.

    Returns
    -------
    numpy.ndarray or None
        The improved point, or ``None`` if no axis move improved the objective.
    """
    origin = np.asarray(x, dtype=float)
    point = origin.copy()
    fbest = f(point.copy())
    changed = False

    for i in range(point.size):
        for delta in (per, -per):
            trial = point.copy()
            trial[i] = origin[i] + delta
            ftrial = f(trial)
            if ftrial < fbest:
                point = trial
                fbest = ftrial
                changed = True
                break

    if changed:
        return point
    return None


__all__ = ["explore_around"]
