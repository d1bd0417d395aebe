"""Checks applied to objective values while debug mode is on."""

from __future__ import annotations

import numpy as np

from ..logging import get_logger

logger = get_logger(__name__)


def check_finite(value: float, where: str = "objective") -> bool:
    """
    Report whether ``value`` is a finite real number.

    Non-finite values are logged at WARNING level but never raised: NaN and
    infinities are the caller's responsibility and simply fail every
    improvement comparison in the search.

    Parameters
    ----------
    value:
        Scalar returned by a caller-supplied function.
    where:
        Label used in the log message.

    Returns
    -------
    bool
        True if the value is finite.
    """
    finite = bool(np.isfinite(value))
    if not finite:
        logger.warning("Non-finite %s value encountered: %r", where, value)
    return finite


__all__ = ["check_finite"]
