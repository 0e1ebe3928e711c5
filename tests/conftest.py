"""Pytest configuration and fixtures."""

import random

import pytest

from safemath.config import MathConfig


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for property checks."""
    return random.Random(0x5AFE)


@pytest.fixture
def tight_config() -> MathConfig:
    """Config with a small iteration cap for convergence-failure tests."""
    return MathConfig(max_series_terms=16)
