"""Root-level pytest configuration for all tests."""

import pytest
import structlog
from fastapi.testclient import TestClient

from jrpc_core.config import Settings
from jrpc_core.main import create_app


@pytest.fixture(autouse=True)
def clear_log_context():
    """Drop trace ids bound by earlier requests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DEBUG=True, ENABLE_METRICS=True, LOG_LEVEL="WARNING")


@pytest.fixture
def client(test_settings):
    """Create test client for the default dispatch."""
    return TestClient(create_app(app_settings=test_settings))


@pytest.fixture
def valid_request() -> dict:
    return {"id": 1, "jsonrpc": "2.0", "method": "add", "params": [2, 3]}
