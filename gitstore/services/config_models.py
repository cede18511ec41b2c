"""
Pydantic models for gitstore configuration.

Uses pydantic-settings for environment variable validation and type coercion.
"""

from __future__ import annotations

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitstore.adapters.repository import DEFAULT_USER
from gitstore.common.exceptions import ConfigurationError
from gitstore.common.logging import resolve_log_level


class GitstoreSettings(BaseSettings):
    """
    Settings for reference validation and the CLI.

    Usage:
        settings = GitstoreSettings()
        validator = RefValidator(default_user=settings.default_user)
    """

    model_config = SettingsConfigDict(env_prefix="GITSTORE_", env_file=".env", extra="ignore")

    default_user: str = Field(default=DEFAULT_USER, min_length=1, description="User assumed for ssh/git URLs without one")
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    # Fallback credentials for the CLI
    user: str = ""
    password: SecretStr = SecretStr("")
    private_key_path: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        if isinstance(v, str):
            resolve_log_level(v)
            v = v.upper()
        return v


def load_settings() -> GitstoreSettings:
    """
    Load settings from the environment and .env file.

    Raises:
        ConfigurationError: If any GITSTORE_* value fails validation
    """
    try:
        return GitstoreSettings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid gitstore settings: {e}") from e
