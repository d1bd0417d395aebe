"""Debug mode switch for patternsearch."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "PATTERNSEARCH_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is on.

    In debug mode the search drivers inspect every objective value and log a
    warning for non-finite ones. Search results are the same either way.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set debug mode, restoring the previous value on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
