"""
Suite Settings
==============

Target API and test-run configuration using Pydantic Settings.
Every field is read from the environment with the ``API_`` prefix
(``API_BASE_URL``, ``API_AUTH_TOKEN``, ...) or from a local ``.env`` file.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """API test suite settings with environment variable support."""

    # Target API
    base_url: str = Field(default="http://localhost:3000", description="API base URL")
    auth_token: str = Field(default="", description="Bearer token for authenticated requests")
    invalid_token: str = Field(
        default="invalid-token", description="Token expected to be rejected by the API"
    )
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # Run Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, ci"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")
    require_live: bool = Field(
        default=False, description="Fail instead of skip when the API is unreachable"
    )

    # Fixture Identifiers
    project_ref: str = Field(default="proj_test", description="Project reference for env vars and runs")
    env_slug: str = Field(default="dev", description="Environment slug for env vars")
    task_identifier: str = Field(default="hello-world", description="Task to trigger")
    run_id: Optional[str] = Field(default=None, description="Existing run id")
    delayed_run_id: Optional[str] = Field(default=None, description="Existing run in DELAYED state")

    # Limits
    batch_limit: int = Field(default=500, description="Maximum items accepted by batch trigger")
    large_payload_size: int = Field(default=10000, description="Length of oversized string fields")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL scheme and strip trailing slashes."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "ci"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v

    @field_validator("batch_limit", "large_payload_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Limits must be at least 1")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="API_",
        extra="ignore",
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
