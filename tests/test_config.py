"""Tests for environment-based settings and logging setup."""

import pytest
import structlog
from pydantic import ValidationError

from jrpc_core.config import Settings
from jrpc_core.logging import configure_logging


class TestSettings:
    """Test settings loading."""

    def test_defaults(self):
        settings = Settings()
        assert settings.API_PREFIX == "/api/v1"
        assert settings.JSONRPC_PATH == "/jsonrpc"
        assert settings.LOG_LEVEL == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("JRPC_PORT", "9100")
        monkeypatch.setenv("JRPC_ENABLE_METRICS", "false")
        settings = Settings()
        assert settings.PORT == 9100
        assert settings.ENABLE_METRICS is False

    def test_log_level_normalized(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="loud")

    def test_path_validation(self):
        assert Settings(JSONRPC_PATH="/rpc/").JSONRPC_PATH == "/rpc"
        with pytest.raises(ValidationError):
            Settings(JSONRPC_PATH="rpc")


class TestLogging:
    """Test structlog configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_json_renderer(self):
        configure_logging("WARNING", json_logs=True)
        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.contextvars.merge_contextvars
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        configure_logging("DEBUG", json_logs=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
