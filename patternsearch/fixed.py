"""Fixed-dimension entry points.

Each function here is the generic driver of the same name restricted to
points of dimension 2 or 3: the starting point must have exactly that many
coordinates, otherwise ``ValueError`` is raised before any work is done.
"""

from __future__ import annotations

import functools
from typing import Callable

from .core import Array, as_point
from .driver import search, search_with_n, search_with_penalty, search_with_penalty_and_n


def _fixed_dimension(func: Callable[..., Array], dim: int) -> Callable[..., Array]:
    @functools.wraps(func)
    def wrapper(x0: Array, *args, **kwargs) -> Array:
        return func(as_point(x0, dim=dim), *args, **kwargs)

    wrapper.__name__ = f"{func.__name__}_{dim}d"
    wrapper.__qualname__ = wrapper.__name__
    wrapper.__doc__ = (
        f"{dim}-dimensional :func:`patternsearch.{func.__name__}`.\n\n"
        f"{func.__doc__ or ''}"
    )
    return wrapper


search_2d = _fixed_dimension(search, 2)
search_3d = _fixed_dimension(search, 3)
search_with_n_2d = _fixed_dimension(search_with_n, 2)
search_with_n_3d = _fixed_dimension(search_with_n, 3)
search_with_penalty_2d = _fixed_dimension(search_with_penalty, 2)
search_with_penalty_3d = _fixed_dimension(search_with_penalty, 3)
search_with_penalty_and_n_2d = _fixed_dimension(search_with_penalty_and_n, 2)
search_with_penalty_and_n_3d = _fixed_dimension(search_with_penalty_and_n, 3)


__all__ = [
    "search_2d",
    "search_3d",
    "search_with_n_2d",
    "search_with_n_3d",
    "search_with_penalty_2d",
    "search_with_penalty_3d",
    "search_with_penalty_and_n_2d",
    "search_with_penalty_and_n_3d",
]
