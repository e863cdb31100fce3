"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, patient_records.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from patient_records.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    PostgreSQL uses the default async queue pool with pool_pre_ping=True so
    stale connections are detected before use. SQLite gets a NullPool because
    aiosqlite connections are cheap and bound to the event loop that opened them.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine (cached per process)

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    settings = get_settings()
    db_config = settings.database

    if db_config.is_sqlite:
        return create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            poolclass=NullPool,
        )

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Bound to the cached engine with autoflush=False for explicit transaction
    control and expire_on_commit=False so committed rows stay readable.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Raises:
        SQLAlchemyError: Propagated from database operations

    Usage:
        from fastapi import Depends

        @router.get("/pacientes/listar")
        async def listar(db: AsyncSession = Depends(get_async_db)):
            return await patient_crud.get_all(db)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the cached engine and forget cached factories."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
    get_async_session_factory.cache_clear()
    get_async_engine.cache_clear()
