"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base: Model building block
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - PatientModel: Patient record entity
  - PatientCRUD, patient_crud: Patient record store

Dependencies: sqlalchemy, patient_records.configs
System role: Database adapter providing persistent storage for patient records.
"""

from patient_records.boundary.db.base import Base
from patient_records.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from patient_records.boundary.db.models.patient_model import PatientModel
from patient_records.boundary.db.CRUD import (
    BaseCRUD,
    PatientCRUD,
    patient_crud,
)

__all__ = [
    # Base classes
    "Base",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "PatientModel",
    # CRUD
    "BaseCRUD",
    "PatientCRUD",
    "patient_crud",
]
