"""
Shared fixtures for the predictor tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from src.utils.constants import AppSettings
from src.utils.yaml_config import clear_cache


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from the caller's environment and the config cache."""
    for var in ("APP_ENVIRONMENT", "PREDICTION_DELAY_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def settings():
    return AppSettings(delay_seconds=0.0)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
