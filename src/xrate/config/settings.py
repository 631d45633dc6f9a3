"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables with validation and an optional .env file.

Files that USE this module:
- xrate.adapters.providers.xml_feed (default feed URL and HTTP timeout)
- xrate.shared.logging_conf (log destinations and rotation)

Files that this module USES:
- xrate.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xrate.shared.validators import validate_base_url  # Validate feed URL format


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Rate feed ---
    rate_feed_base_url: str = Field(
        default="http://api.finance.xaviermedia.com/api/", alias="RATE_FEED_BASE_URL"
    )

    # --- HTTP Settings ---
    # None keeps the requests default (no timeout)
    http_timeout_seconds: Optional[float] = Field(default=None, alias="HTTP_TIMEOUT_SECONDS", gt=0, le=300)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="XRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("rate_feed_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate feed base URL format."""
        if not validate_base_url(v):
            raise ValueError("RATE_FEED_BASE_URL must be an http(s) URL with a host")
        return v


# Global settings instance
settings = Settings()
