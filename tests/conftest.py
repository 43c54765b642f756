"""
Pytest configuration for date_tasks tests.

Adds the project root to the Python path so tests can import date_tasks
without installing it, and pins the configured local timezone to UTC so
results do not depend on the machine running the tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from date_tasks.config import LOCAL_TIMEZONE_ENV, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def utc_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LOCAL_TIMEZONE_ENV, "UTC")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
