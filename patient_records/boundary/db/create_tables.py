"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, patient_records.configs
System role: Database schema initialization

Usage:
    python -m patient_records.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from patient_records.boundary.db.base import Base
from patient_records.boundary.db.connection import dispose_engine, get_async_engine

# Import all models to register them with Base.metadata
from patient_records.boundary.db.models.patient_model import PatientModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: issues CREATE TABLE only for missing tables, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use (defaults to the configured application engine)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def _main() -> None:
    try:
        await create_all_tables()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
    print("All tables created successfully.")
