"""Client configuration using Pydantic Settings."""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://maps.googleapis.com/maps/api/geocode/json"


class Settings(BaseSettings):
    """Geocoding client settings loaded from environment variables."""

    # Service Configuration
    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Geocoding service JSON endpoint"
    )
    timeout: Optional[float] = Field(
        default=None,
        ge=0,
        description="Timeout in seconds for the default transport (None disables it)"
    )

    # Credential Configuration
    api_key: str = Field(
        default="",
        description="Plain API key, ignored when a client identifier is set"
    )
    client: str = Field(
        default="",
        description="Premium plan client identifier"
    )
    signature: str = Field(
        default="",
        description="URL signature sent alongside the client identifier"
    )

    # Request Defaults
    channel: str = Field(
        default="",
        description="Channel tag used for usage reporting"
    )
    language: str = Field(
        default="",
        description="Default response language"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Log level used by the command-line tool"
    )

    model_config = SettingsConfigDict(
        env_prefix="GEOCODE_",
        env_file=".env" if not os.getenv("TESTING") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate that the endpoint is an absolute HTTP(S) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "GEOCODE_ENDPOINT must be an http:// or https:// URL"
            )
        return v.rstrip("?")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def has_credentials(self) -> bool:
        """Whether any credential is configured."""
        return bool(self.client or self.api_key)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
