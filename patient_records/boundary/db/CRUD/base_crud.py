"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Save, Delete operations that can be
inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy, patient_records.core.exceptions
System role: Foundation for all database CRUD operations
"""

import logging
from typing import Generic, TypeVar, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from patient_records.boundary.db.base import Base
from patient_records.core.exceptions import ConstraintViolationError

ModelT = TypeVar("ModelT", bound=Base)

UNIQUE_VIOLATION_SQLSTATE = "23505"

logger = logging.getLogger(__name__)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model
    keyed by an integer ``id``. Writes are flushed, never committed; the
    caller owns the transaction.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID

        Raises:
            ConstraintViolationError: If the insert breaks a unique or not-null constraint
        """
        instance = self.model(**kwargs)
        return await self.save(session, instance)

    async def save(self, session: AsyncSession, instance: ModelT) -> ModelT:
        """
        Insert a new instance or persist changes made to a loaded one.

        On constraint failure the session is rolled back, so everything not yet
        committed in it is discarded.

        Args:
            session: Async database session
            instance: Transient or persistent model instance

        Returns:
            The same instance, refreshed from the database

        Raises:
            ConstraintViolationError: If the write breaks a database constraint
        """
        session.add(instance)
        try:
            await session.flush()
        except IntegrityError as e:
            # Built before rollback expires the instance's attributes
            error = self.constraint_error(instance, e)
            logger.warning(
                "Write rejected by database constraint",
                extra={"table": self.model.__tablename__, "error": str(e.orig)},
            )
            await session.rollback()
            raise error from e
        await session.refresh(instance)
        return instance

    def constraint_error(
        self, instance: ModelT, exc: IntegrityError
    ) -> ConstraintViolationError:
        """
        Build the domain error for a failed write.

        Subclasses override this to name the violated field.
        """
        return ConstraintViolationError(
            f"Constraint violated on {self.model.__tablename__}",
            details={"error": str(exc.orig)},
        )

    @staticmethod
    def is_unique_violation(exc: IntegrityError) -> bool:
        """
        Tell a unique-key collision apart from NOT NULL / FK / CHECK failures.

        asyncpg errors carry SQLSTATE 23505; SQLite only reports it in the message.
        """
        if getattr(exc.orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
            return True
        message = str(exc.orig).lower()
        return "unique constraint" in message or "duplicate key" in message

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        """
        Retrieve all records ordered by primary key.

        Args:
            session: Async database session

        Returns:
            Sequence of model instances (empty when the table is empty)
        """
        stmt = select(self.model).order_by(self.model.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete(self, session: AsyncSession, instance: ModelT) -> None:
        """
        Delete a loaded record.

        Args:
            session: Async database session
            instance: Persistent model instance (must not be stale)
        """
        await session.delete(instance)
        await session.flush()
