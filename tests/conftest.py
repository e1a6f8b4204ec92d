from __future__ import annotations

import random

import pytest
from hypothesis import settings

from threeset.utils.io_utils import load_settings


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "hypothesis: property-based tests")


# ---- Deterministic Testing Configuration ---------------------

DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    yield
    random.seed()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so tests never see each other's config files."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    database=None,
)
settings.load_profile("deterministic")
