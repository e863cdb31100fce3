"""
Patient CRUD operations.

Provides Create, Read, Save, Delete operations for PatientModel
with lookup by document identifier.

Dependencies: sqlalchemy, patient_records.boundary.db.models
System role: Patient record store
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from patient_records.boundary.db.models.patient_model import PatientModel
from patient_records.boundary.db.CRUD.base_crud import BaseCRUD
from patient_records.core.exceptions import ConstraintViolationError


class PatientCRUD(BaseCRUD[PatientModel]):
    """
    CRUD operations for PatientModel.

    Extends BaseCRUD with the natural-key lookup on ``documento``.
    """

    def __init__(self) -> None:
        """Initialize PatientCRUD with PatientModel."""
        super().__init__(PatientModel)

    async def get_by_documento(
        self,
        session: AsyncSession,
        documento: str,
    ) -> PatientModel | None:
        """
        Retrieve a patient by document identifier.

        Args:
            session: Async database session
            documento: Document identifier

        Returns:
            PatientModel if found, None otherwise (documento is unique)
        """
        stmt = select(PatientModel).where(PatientModel.documento == documento)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    def constraint_error(
        self, instance: PatientModel, exc: IntegrityError
    ) -> ConstraintViolationError:
        # documento carries the only unique index on pacientes
        if not self.is_unique_violation(exc):
            return super().constraint_error(instance, exc)
        return ConstraintViolationError(
            f"Patient with documento {instance.documento} already exists",
            field="documento",
            details={"documento": instance.documento},
        )


patient_crud = PatientCRUD()
