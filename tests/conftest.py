"""Pytest configuration for cacheban tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_registered_engine():
    """Reset the process-wide engine around each test."""
    import cacheban.decorators

    original_engine = cacheban.decorators._engine

    yield

    cacheban.decorators._engine = original_engine
