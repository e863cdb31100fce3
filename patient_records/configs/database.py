"""
Database configuration settings.

Manages connection parameters for the patient record store.
PostgreSQL (asyncpg) is the default target; a full URL override allows
SQLite (aiosqlite) for local development.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from patient_records.configs.base import settings_config


class DatabaseSettings(BaseSettings):
    """Relational database configuration."""

    model_config = settings_config("DATABASE_")

    url: str | None = Field(
        default=None,
        description="Full async SQLAlchemy URL, overrides host/port/user/password/db",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="historial_pacientes", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="disable", description="SSL mode for PostgreSQL connections")

    auto_create_tables: bool = Field(
        default=False,
        description="Create missing tables during application startup",
    )

    @property
    def async_database_url(self) -> str:
        """
        Construct async database connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL (asyncpg uses 'ssl' param)
        """
        if self.url:
            return self.url

        ssl_param = "?ssl=require" if self.sslmode == "require" else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}{ssl_param}"
        )

    @property
    def is_sqlite(self) -> bool:
        """Whether the resolved URL targets SQLite."""
        return self.async_database_url.startswith("sqlite")
