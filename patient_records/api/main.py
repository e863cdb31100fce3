"""
FastAPI application with assembled routers.

Initializes FastAPI app, registers routers, adds middleware, configures
lifespan, and launches uvicorn when run as a module.

Dependencies: fastapi, uvicorn, patient_records.api, patient_records.observability
System role: API entry point with router assembly and server launch

Usage:
    python -m patient_records.api.main
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patient_records.api import api_router
from patient_records.boundary.db.connection import dispose_engine
from patient_records.boundary.db.create_tables import create_all_tables
from patient_records.configs import get_settings
from patient_records.observability.logger import configure_logging
from patient_records.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, optionally creates missing tables on startup, and
    disposes the database engine on shutdown.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={"environment": settings.environment},
    )

    if settings.database.auto_create_tables:
        try:
            await create_all_tables()
        except Exception as e:
            logger.exception("Failed to create tables", extra={"error": str(e)})
            raise

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Application shutdown: database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Historial de Pacientes API",
        description="Patient record management: create, list, lookup, treatment update, delete",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added first = innermost; correlation ID must be set before request logging runs
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "patient_records.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
