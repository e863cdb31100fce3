"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from patient_records.boundary.db.CRUD import patient_crud

    patient = await patient_crud.get_by_documento(db, "123")
"""

from patient_records.boundary.db.CRUD.base_crud import BaseCRUD
from patient_records.boundary.db.CRUD.patient_crud import PatientCRUD, patient_crud

__all__ = [
    "BaseCRUD",
    "PatientCRUD",
    "patient_crud",
]
