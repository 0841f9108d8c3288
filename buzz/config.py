"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from buzz.domain.model.comment import MAX_CONTENT_LENGTH


class APISettings(BaseModel):
    """Remote API configuration."""

    base_url: str = "http://localhost:5000/api"

    # Per-request timeout applied by the HTTP adapter
    # The comment engine itself imposes no timeout policy
    timeout_seconds: float = 30.0

    # Bearer token issued by the login flow (outside this package)
    # Can be set via API__AUTH_TOKEN env var
    auth_token: str | None = None


class CommentSettings(BaseModel):
    """Comment overlay configuration."""

    # Matches the input field limit of the composer
    max_length: int = Field(default=MAX_CONTENT_LENGTH, ge=1, le=MAX_CONTENT_LENGTH)

    # Overlay slide-in / slide-out durations
    entrance_seconds: float = Field(default=0.35, ge=0)
    exit_seconds: float = Field(default=0.2, ge=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using __ for nested values:

        ENVIRONMENT=production
        API__BASE_URL=https://api.example.com
        API__AUTH_TOKEN=...
        COMMENTS__EXIT_SECONDS=0.25
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    api: APISettings = APISettings()
    comments: CommentSettings = CommentSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
