"""
Patient directory service orchestrator.

Coordinates patient record lifecycle operations: create, list, lookup by
document identifier, treatment update and delete. Each operation is one
store round trip; absence is reported as None (or DeleteOutcome.NOT_FOUND),
never as an exception.

Dependencies: patient_records.boundary.db.CRUD, patient_records.models
System role: Patient use case orchestration
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from patient_records.boundary.db.CRUD.patient_crud import PatientCRUD, patient_crud
from patient_records.boundary.db.models.patient_model import PatientModel
from patient_records.core.exceptions import ConstraintViolationError
from patient_records.models.patient import CreatePatientRequest, DeleteOutcome
from patient_records.observability.log_utils import mask_documento

logger = logging.getLogger(__name__)


class PatientService:
    """Patient directory service orchestrator."""

    def __init__(self, db: AsyncSession, store: PatientCRUD = patient_crud) -> None:
        """
        Initialize patient service with async database session and record store.

        Args:
            db: Async SQLAlchemy session (owns the transaction)
            store: Patient record store
        """
        self.db = db
        self.store = store

    async def create_patient(self, data: CreatePatientRequest) -> PatientModel:
        """
        Create a new patient record from the request fields.

        Args:
            data: Patient fields (nombre, apellido, documento, fecha_nacimiento, tratamiento)

        Returns:
            PatientModel: Persisted patient including its assigned id

        Raises:
            ConstraintViolationError: If documento already exists
            Exception: If database operation fails
        """
        try:
            patient = await self.store.create(
                self.db,
                nombre=data.nombre,
                apellido=data.apellido,
                documento=data.documento,
                fecha_nacimiento=data.fecha_nacimiento,
                tratamiento=data.tratamiento,
            )
            await self.db.commit()
            logger.info(
                "Patient created",
                extra={"patient_id": patient.id, "documento": mask_documento(data.documento)}
            )
            return patient
        except ConstraintViolationError as e:
            logger.warning(
                "Duplicate patient documento",
                extra={"documento": mask_documento(data.documento), "field": e.field}
            )
            raise
        except Exception as e:
            logger.error(
                "Failed to create patient",
                extra={"error_type": type(e).__name__, "documento": mask_documento(data.documento)}
            )
            raise

    async def list_patients(self) -> Sequence[PatientModel]:
        """
        Get every stored patient.

        Returns:
            Sequence[PatientModel]: All patients, empty when none exist
        """
        try:
            return await self.store.get_all(self.db)
        except Exception as e:
            logger.error("Failed to list patients", extra={"error_type": type(e).__name__})
            raise

    async def find_by_document(self, documento: str) -> PatientModel | None:
        """
        Get patient by document identifier.

        Args:
            documento: Document identifier

        Returns:
            PatientModel | None: Matching patient, None if absent
        """
        try:
            return await self.store.get_by_documento(self.db, documento)
        except Exception as e:
            logger.error(
                "Failed to get patient",
                extra={"error_type": type(e).__name__, "documento": mask_documento(documento)}
            )
            raise

    async def update_treatment(
        self,
        documento: str,
        tratamiento: str,
    ) -> PatientModel | None:
        """
        Replace the treatment of the patient with the given document identifier.

        Args:
            documento: Document identifier
            tratamiento: New treatment text

        Returns:
            PatientModel | None: Updated patient, None if absent (store untouched)
        """
        try:
            patient = await self.store.get_by_documento(self.db, documento)
            if patient is None:
                logger.info(
                    "Patient not found for treatment update",
                    extra={"documento": mask_documento(documento)},
                )
                return None

            patient.tratamiento = tratamiento
            patient = await self.store.save(self.db, patient)
            await self.db.commit()

            logger.info(
                "Patient treatment updated",
                extra={"patient_id": patient.id, "documento": mask_documento(documento)}
            )
            return patient
        except Exception as e:
            logger.error(
                "Failed to update patient treatment",
                extra={"error_type": type(e).__name__, "documento": mask_documento(documento)}
            )
            raise

    async def delete_patient(self, documento: str) -> DeleteOutcome:
        """
        Delete the patient with the given document identifier.

        Args:
            documento: Document identifier

        Returns:
            DeleteOutcome: DELETED if removed, NOT_FOUND if no such patient
        """
        try:
            patient = await self.store.get_by_documento(self.db, documento)
            if patient is None:
                logger.info(
                    "Patient not found for deletion",
                    extra={"documento": mask_documento(documento)},
                )
                return DeleteOutcome.NOT_FOUND

            await self.store.delete(self.db, patient)
            await self.db.commit()

            logger.info("Patient deleted", extra={"documento": mask_documento(documento)})
            return DeleteOutcome.DELETED
        except Exception as e:
            logger.error(
                "Failed to delete patient",
                extra={"error_type": type(e).__name__, "documento": mask_documento(documento)}
            )
            raise
