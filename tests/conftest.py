"""Pytest configuration and shared fixtures for strongwolfe tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A recording objective that keeps track of every evaluated step
"""

import os
from typing import Callable, List

import numpy as np
import pytest
import torch


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global numpy and torch seeds for every test."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


class RecordingObjective:
    """Scalar objective that records the steps at which it is evaluated."""

    def __init__(
        self, value_fn: Callable[[float], float], slope_fn: Callable[[float], float]
    ) -> None:
        self.value_fn = value_fn
        self.slope_fn = slope_fn
        self.value_calls: List[float] = []
        self.slope_calls: List[float] = []

    def value(self, alpha: float) -> float:
        self.value_calls.append(alpha)
        return self.value_fn(alpha)

    def slope(self, alpha: float) -> float:
        self.slope_calls.append(alpha)
        return self.slope_fn(alpha)


@pytest.fixture
def recording_objective() -> Callable[..., RecordingObjective]:
    """Factory building a fresh RecordingObjective from two scalar functions."""
    return RecordingObjective
