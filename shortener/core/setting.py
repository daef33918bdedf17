"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- Built once at process start and handed to create_app(), never read from
  module globals inside request handlers
- Empty environment variables fall back to the defaults (PORT="" == unset)
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "DEVELOPMENT"]

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Server Configuration
    PORT: int = Field(
        default=8080,
        ge=0,
        le=65535,
        description="TCP port the HTTP listener binds to"
    )
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP listener binds to"
    )

    # Service Identity
    ENVIRONMENT: str = Field(
        default=DEVELOPMENT,
        description="Deployment environment name reported by the probes"
    )
    VERSION: str = Field(
        default="dev",
        description="Version string reported by the probes"
    )
    SERVICE_NAME: str = Field(
        default="GoShorter URL Shortener",
        description="Service name reported by GET /"
    )

    # Short URL Construction
    # When unset, short URLs are built as http://localhost:{PORT}/{short_id}
    PUBLIC_BASE_URL: Optional[str] = Field(
        default=None,
        description="Public base URL used when building short URLs"
    )

    # Connection Timeouts (seconds)
    READ_TIMEOUT: float = Field(default=10.0, gt=0, description="Request read budget")
    WRITE_TIMEOUT: float = Field(default=10.0, gt=0, description="Response write budget")
    IDLE_TIMEOUT: float = Field(default=60.0, gt=0, description="Keep-alive idle timeout")

    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Root logging level"
    )

    @field_validator("PUBLIC_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.rstrip("/") or None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @property
    def base_url(self) -> str:
        """Base that short identifiers are appended to."""
        if self.PUBLIC_BASE_URL:
            return self.PUBLIC_BASE_URL
        return f"http://localhost:{self.PORT}"

    @property
    def request_timeout(self) -> float:
        """Total time a single request may spend being read and answered."""
        return self.READ_TIMEOUT + self.WRITE_TIMEOUT

    @property
    def docs_enabled(self) -> bool:
        return self.ENVIRONMENT == DEVELOPMENT
