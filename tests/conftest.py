"""
Pytest configuration and fixtures for ff-log-facade tests.
"""

import pytest
from ff_log_facade import create
from ff_log_facade.config import reset_config
from ff_log_facade.settings import get_settings
from ff_log_facade.testing import CaptureBackend


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from FF_LOG_* variables and cached settings."""
    for key in (
        "FF_LOG_BACKEND",
        "FF_LOG_LEVEL",
        "FF_LOG_FORMAT",
        "FF_LOG_COLORS",
        "FF_LOG_ADD_TIMESTAMP",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    get_settings.cache_clear()
    yield
    reset_config()
    get_settings.cache_clear()


@pytest.fixture
def backend():
    """A capture backend with every level enabled."""
    return CaptureBackend()


@pytest.fixture
def log(backend):
    """A facade over the capture backend."""
    return create("test.Facade", backend=backend)

