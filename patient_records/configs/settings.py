"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from patient_records.configs.api import ApiSettings
from patient_records.configs.base import ServiceSettings
from patient_records.configs.database import DatabaseSettings


class Settings(ServiceSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from patient_records.configs import get_settings
        settings = get_settings()
    """
    return Settings()
