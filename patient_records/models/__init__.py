"""
API request/response schemas.

Exports:
  - CreatePatientRequest, PatientResponse: Patient record contracts
  - DeleteOutcome: Result of a delete-by-document call
  - ErrorResponse: Error body schema
"""

from patient_records.models.common import ErrorResponse
from patient_records.models.patient import (
    CreatePatientRequest,
    DeleteOutcome,
    PatientResponse,
)

__all__ = [
    "CreatePatientRequest",
    "DeleteOutcome",
    "ErrorResponse",
    "PatientResponse",
]
