"""patternsearch - derivative-free Hooke–Jeeves pattern search on NumPy vectors.

Example
-------
>>> import numpy as np
>>> from patternsearch import search_2d
>>> x = search_2d(np.array([5.0, 5.0]), 1.0, 1e-6, lambda x: float(x @ x))
>>> bool(np.linalg.norm(x) < 1e-5)
True
"""

__version__ = "0.1.0"

from .config import SearchConfig, run_search
from .core import SHRINK_FACTOR, SearchResult
from .diagnostics import (
    check_finite,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .driver import (
    hooke_jeeves,
    search,
    search_with_n,
    search_with_penalty,
    search_with_penalty_and_n,
)
from .explore import explore_around
from .fixed import (
    search_2d,
    search_3d,
    search_with_n_2d,
    search_with_n_3d,
    search_with_penalty_2d,
    search_with_penalty_3d,
    search_with_penalty_and_n_2d,
    search_with_penalty_and_n_3d,
)
from .logging import configure_logging, get_logger, set_log_level
from .pattern import pattern_move
from .schedules import (
    constant_schedule,
    geometric_schedule,
    linear_schedule,
    sample_schedule,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "SHRINK_FACTOR",
    "SearchResult",
    # Algorithm pieces
    "explore_around",
    "pattern_move",
    # Drivers
    "hooke_jeeves",
    "search",
    "search_with_n",
    "search_with_penalty",
    "search_with_penalty_and_n",
    # Fixed-dimension entry points
    "search_2d",
    "search_3d",
    "search_with_n_2d",
    "search_with_n_3d",
    "search_with_penalty_2d",
    "search_with_penalty_3d",
    "search_with_penalty_and_n_2d",
    "search_with_penalty_and_n_3d",
    # Configuration
    "SearchConfig",
    "run_search",
    # Penalty schedules
    "constant_schedule",
    "linear_schedule",
    "geometric_schedule",
    "sample_schedule",
    # Diagnostics
    "check_finite",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
