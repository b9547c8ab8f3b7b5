"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config.theme import FormTheme


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Signup service
    signup_url: str = (
        "https://api.challenge.hennge.com/password-validation-challenge-api/001/challenge-signup"
    )
    signup_token: SecretStr = SecretStr("")  # Bearer credential, supplied via SIGNUP_TOKEN
    signup_timeout_seconds: float = 10.0  # Upper bound for a single submission

    # Logging
    log_level: str = "INFO"

    # Presentation
    theme: FormTheme = FormTheme()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
