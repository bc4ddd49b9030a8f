"""
Settings for ff-log-facade, read from the environment.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogSettings(BaseSettings):
    """
    Facade settings using Pydantic Settings.

    Every field can be set with an ``FF_LOG_`` prefixed environment variable,
    e.g. ``FF_LOG_BACKEND=null`` or ``FF_LOG_FORMAT=json``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FF_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Factory settings
    backend: str = "stdlib"

    # Output settings used by configure_logging()
    level: str = "INFO"
    format: str = "console"  # "console" or "json"
    colors: bool = True
    add_timestamp: bool = True

    @field_validator("backend", "format")
    @classmethod
    def _lower(cls, value: str) -> str:
        return value.lower()

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> LogSettings:
    """Get cached settings instance."""
    return LogSettings()
