"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, service mocks, sample patient data
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from patient_records.models.patient import CreatePatientRequest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from patient_records.boundary.db.base import Base
    from patient_records.boundary.db.models.patient_model import PatientModel  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def patient_request() -> CreatePatientRequest:
    """Sample creation payload (Ana Ruiz, documento 123)."""
    return CreatePatientRequest(
        nombre="Ana",
        apellido="Ruiz",
        documento="123",
        fecha_nacimiento=date(1990, 1, 1),
        tratamiento="none",
    )


@pytest.fixture
def mock_patient_service():
    """
    Create mock PatientService for testing.

    Returns:
        AsyncMock: Mocked PatientService with async methods
    """
    service = AsyncMock()
    service.db = AsyncMock()
    return service
