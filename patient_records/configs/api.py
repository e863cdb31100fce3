"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Uvicorn and CORS configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from patient_records.configs.base import settings_config


class ApiSettings(BaseSettings):
    """Uvicorn server and CORS configuration."""

    model_config = settings_config("API_")

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    reload: bool = Field(default=False, description="Enable uvicorn autoreload")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
