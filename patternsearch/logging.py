"""Logging utilities for patternsearch.

Every module obtains its logger through :func:`get_logger`, which hangs it
under the ``patternsearch`` namespace with a single stderr handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_ROOT_NAME = "patternsearch"
_DEFAULT_LEVEL = logging.WARNING

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(stream: object, level: int, format_string: str) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for ``name``.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            ``patternsearch`` namespace are prefixed with it; ``None`` maps to
            the package logger itself.

    Returns:
        A logger that writes ``[LEVEL] name: message`` lines to stderr and does
        not propagate to the root logger.

    Example:
        >>> from patternsearch.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("starting search")
    """
    if name is None or name == _ROOT_NAME:
        logger_name = _ROOT_NAME
    elif name.startswith(_ROOT_NAME + "."):
        logger_name = name
    else:
        logger_name = f"{_ROOT_NAME}.{name}"

    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(sys.stderr, _DEFAULT_LEVEL, DEFAULT_FORMAT))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every patternsearch logger, present and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``,
            ``"INFO"``, ...). Unknown names fall back to WARNING.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of all patternsearch loggers.

    Intended to be called once at application start-up, e.g. to route search
    progress to a file or raise verbosity to DEBUG while tuning a run.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format; defaults to :data:`DEFAULT_FORMAT`.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    if stream is None:
        stream = sys.stderr
    if format_string is None:
        format_string = DEFAULT_FORMAT

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(stream, level, format_string))

    _DEFAULT_LEVEL = level


__all__ = ["DEFAULT_FORMAT", "configure_logging", "get_logger", "set_log_level"]
