"""Shared fixtures for polyshare tests."""

import random

import pytest


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)
