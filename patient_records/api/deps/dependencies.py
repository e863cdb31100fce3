"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: patient_records.application, patient_records.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from patient_records.boundary.db import get_async_db, patient_crud
from patient_records.application.services import PatientService


def get_patient_service(db: AsyncSession = Depends(get_async_db)) -> PatientService:
    """
    Get patient service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PatientService: Patient service bound to the request session
    """
    return PatientService(db=db, store=patient_crud)
