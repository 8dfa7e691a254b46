"""
JSON-RPC Service Configuration

Environment-based configuration for the HTTP binding and logging.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    DEBUG: bool = Field(default=False, description="Enable debug mode")
    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8001, description="Server port")

    # JSON-RPC endpoint
    API_PREFIX: str = Field(default="/api/v1", description="Prefix for all routes")
    JSONRPC_PATH: str = Field(default="/jsonrpc", description="JSON-RPC endpoint path")

    # Monitoring
    ENABLE_METRICS: bool = Field(default=True, description="Enable Prometheus metrics")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON: bool = Field(default=False, description="Render logs as JSON lines")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("JSONRPC_PATH", "API_PREFIX")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if v and not v.startswith("/"):
            raise ValueError(f"Path must start with '/': {v}")
        return v.rstrip("/")

    model_config = {
        "env_prefix": "JRPC_",
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
