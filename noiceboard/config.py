"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class NoiceSettings(BaseModel):
    """Noice economy configuration."""

    # Per-user limit for groups registered without an explicit limit
    default_noice_limit: int = Field(default=4, ge=1)

    # Amount given when a request does not name one
    reaction_amount: int = Field(default=1, ge=0)

    # Balance of newly registered users
    initial_user_balance: int = Field(default=100, ge=0)


class StorageSettings(BaseModel):
    """Storage configuration."""

    # Fill the in-memory store with demo users, groups and posts on startup
    seed_demo_data: bool = True


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        NOICE__DEFAULT_NOICE_LIMIT=10
        STORAGE__SEED_DEMO_DATA=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows NOICE__REACTION_AMOUNT syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    observability: ObservabilitySettings = ObservabilitySettings()
    noice: NoiceSettings = NoiceSettings()
    storage: StorageSettings = StorageSettings()
