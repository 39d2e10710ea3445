"""
Application configuration using Pydantic Settings.
Loads configuration from environment variables with validation.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_COMMUNITY_WORKFLOWS_API_URL = (
    "https://nodebananapro.com/api/public/community-workflows"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream Configuration
    community_workflows_api_url: str = Field(
        default=DEFAULT_COMMUNITY_WORKFLOWS_API_URL,
        description="Base URL of the hosted community workflows API",
    )
    request_timeout_seconds: float = Field(
        default=90.0,
        description="Deadline for a single upstream workflow lookup",
    )
    cache_revalidate_seconds: int = Field(
        default=600,
        description="Revalidation hint passed to the HTTP client's caching layer",
    )

    # Application Configuration
    app_name: str = Field(
        default="Community Workflow Proxy",
        description="Application name",
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Server Configuration
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=8000,
        description="Server port",
    )

    @field_validator("community_workflows_api_url", mode="before")
    @classmethod
    def default_blank_api_url(cls, v: Optional[str]) -> str:
        """Fall back to the hosted service when the override is blank."""
        if v is None or not str(v).strip():
            return DEFAULT_COMMUNITY_WORKFLOWS_API_URL
        return str(v).strip().rstrip("/")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Ensure the upstream deadline is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be greater than 0")
        return v

    @field_validator("cache_revalidate_seconds")
    @classmethod
    def validate_cache_revalidate(cls, v: int) -> int:
        if v < 0:
            raise ValueError("cache_revalidate_seconds must not be negative")
        return v


# Global settings instance
settings = Settings()
