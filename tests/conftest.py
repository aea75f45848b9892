"""Pytest configuration shared by every test suite.

Settings are read from the environment the first time get_settings() is
called, so the test environment is exported before anything under src/
is imported.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from src.core.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so a test's monkeypatched env is honoured."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_collection_modifyitems(config, items):
    """Mark tests by the suite directory they live in."""
    for item in items:
        path = str(item.fspath)
        for suite in ("unit", "integration", "api"):
            if f"{os.sep}{suite}{os.sep}" in path:
                item.add_marker(getattr(pytest.mark, suite))
