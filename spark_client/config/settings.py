"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spark_client.config.constants import (
    DEFAULT_EXPLORER_URL,
    DEFAULT_INDEXER_URL,
    DEFAULT_NETWORK_NAME,
    DEFAULT_NETWORK_TYPE,
    DEFAULT_NETWORK_URL,
)


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Network
    network_name: str = DEFAULT_NETWORK_NAME
    network_url: str = DEFAULT_NETWORK_URL
    indexer_url: str = DEFAULT_INDEXER_URL
    explorer_url: str = DEFAULT_EXPLORER_URL
    default_network: str = Field(
        default=DEFAULT_NETWORK_TYPE,
        description="Network type selected when the client starts"
    )

    # Wallet provider calls
    provider_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Timeout in seconds for wallet provider calls (None waits forever)"
    )

    # Token metadata override (defaults to the bundled JSON)
    tokens_file: Path | None = None

    # Application
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = "logs/spark_client.log"
    log_rotation: str = "1 day"
    log_retention: str = "7 days"

    model_config = SettingsConfigDict(
        env_prefix="SPARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("network_url", "indexer_url", "explorer_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URLs use http(s)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://, got {v!r}")
        return v

    @field_validator("default_network")
    @classmethod
    def normalize_network(cls, v: str) -> str:
        """Network types are lowercase tags."""
        return v.strip().lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a loguru level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode='after')
    def set_debug_log_level(self) -> 'Settings':
        """Debug mode always logs at DEBUG."""
        if self.debug and self.log_level not in ("TRACE", "DEBUG"):
            self.log_level = "DEBUG"
        return self

    @model_validator(mode='after')
    def validate_tokens_file(self) -> 'Settings':
        """Warn early when the token metadata override is missing."""
        if self.tokens_file is not None and not self.tokens_file.exists():
            logger.warning(f"Token metadata file not found: {self.tokens_file}")
        return self


settings = Settings()
