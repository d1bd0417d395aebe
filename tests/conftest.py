"""Pytest configuration and shared fixtures for patternsearch tests.

This module provides:
- A deterministic numpy RNG fixture for random starting points
- Common objective functions used across the search tests
- Isolation of the global debug-mode switch between tests
"""

import os
from typing import Iterator

import numpy as np
import pytest

from patternsearch.diagnostics import is_debug_enabled, set_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Restore the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def bowl():
    """Sum of squared coordinates."""

    def f(x: np.ndarray) -> float:
        return float(np.sum(np.asarray(x) ** 2))

    return f


@pytest.fixture
def rosenbrock():
    def f(x: np.ndarray) -> float:
        return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2

    return f
