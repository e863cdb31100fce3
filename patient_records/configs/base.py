"""
Shared settings plumbing.

Every settings section reads the same ``.env`` file and differs only in the
environment variable prefix it owns (``DATABASE_``, ``API_`` or none for the
process-wide values below).

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """
    Build the model config for a settings section.

    Args:
        env_prefix: Prefix of the environment variables the section reads

    Returns:
        SettingsConfigDict: Case-insensitive config bound to the shared .env file
    """
    return SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=env_prefix,
        case_sensitive=False,
        extra="ignore",
    )


class ServiceSettings(BaseSettings):
    """Process-wide values read from unprefixed variables (ENVIRONMENT, DEBUG, LOG_LEVEL)."""

    model_config = settings_config()

    environment: str = Field(
        default="development",
        description="Deployment name, logged at startup",
    )
    debug: bool = Field(
        default=False,
        description="FastAPI debug mode (tracebacks in 500 responses)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logger level",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
