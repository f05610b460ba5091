"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EvatrSettings(BaseSettings):
    """Connection settings for the BZSt eVatR XML-RPC endpoint."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    evatr_base_url: str = Field(
        default="https://evatr.bff-online.de/evatrRPC",
        description="eVatR endpoint; the encoded query string is appended after '?'",
    )
    evatr_timeout: float = Field(default=10.0, description="Overall request timeout in seconds")
    evatr_connect_timeout: float = Field(default=5.0, description="TCP connect timeout in seconds")

    @field_validator("evatr_timeout", "evatr_connect_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeouts must be strictly positive."""
        if v <= 0:
            msg = f"Timeout must be positive, got {v}"
            raise ValueError(msg)
        return v


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.evatr.evatr_base_url
        settings.log_level
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # Composed settings (loaded from same .env)
    evatr: EvatrSettings = Field(default_factory=EvatrSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
