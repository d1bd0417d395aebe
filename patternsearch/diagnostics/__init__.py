"""Diagnostics and debugging utilities for patternsearch."""

from .core import check_finite
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_finite",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
