"""Configuration objects for running pattern searches."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional

from .core import Array, Callback, CoefficientFn, SearchResult
from .driver import hooke_jeeves


@dataclass(frozen=True)
class SearchConfig:
    """
    Settings for a Hooke–Jeeves run.

    Exactly one termination criterion must be set: ``eps`` stops the search
    once the step size is no longer above it, ``n`` runs a fixed number of
    outer iterations.

    Args:
        init_step: Initial step size, restored after every successful
            exploration. Must be positive. Defaults to 1.0.
        eps: Step size threshold. Must be positive when given.
        n: Number of outer iterations. Must be a positive integer when given.
        max_advances: Optional cap on window shifts per pattern move. None
            leaves pattern moves unbounded.
        history: Record accepted points, step sizes and coefficients in the
            result. Defaults to False.
    """

    init_step: float = 1.0
    eps: Optional[float] = None
    n: Optional[int] = None
    max_advances: Optional[int] = None
    history: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchConfig":
        """
        Build a config from plain data, e.g. a parsed JSON or TOML section.

        Raises:
            ValueError: If ``data`` contains keys that are not config fields.
        """
        supported = sorted(f.name for f in fields(cls))
        unknown = sorted(set(data) - set(supported))
        if unknown:
            raise ValueError(
                f"Unsupported search config keys {unknown}. "
                f"Supported keys: {supported}"
            )
        return cls(**data)


def run_search(
    config: SearchConfig,
    fun: Callable[..., float],
    x0: Array,
    coef: Optional[CoefficientFn] = None,
    callback: Optional[Callback] = None,
) -> SearchResult:
    """
    Run a pattern search described by ``config``.

    Args:
        config: Search settings.
        fun: Objective ``fun(x)``, or ``fun(x, c)`` when ``coef`` is given.
        x0: Starting point.
        coef: Optional penalty coefficient function of the 1-indexed outer
            iteration.
        callback: Optional ``callback(nit, x, per)`` hook.

    Returns:
        The :class:`SearchResult` of the run.

    Raises:
        ValueError: If the config sets neither or both termination criteria,
            or any of its values is out of range.
    """
    if config.eps is None and config.n is None:
        raise ValueError("SearchConfig must set either eps or n.")
    if config.eps is not None and config.n is not None:
        raise ValueError("SearchConfig must not set both eps and n.")

    return hooke_jeeves(
        fun,
        x0,
        init_step=config.init_step,
        eps=config.eps,
        n=config.n,
        coef=coef,
        max_advances=config.max_advances,
        callback=callback,
        history=config.history,
    )


__all__ = ["SearchConfig", "run_search"]
