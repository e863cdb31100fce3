"""
Core domain module.

Contains the exception hierarchy shared by every layer.
"""

from patient_records.core.exceptions import (
    PatientRecordsException,
    ConstraintViolationError,
)

__all__ = [
    "PatientRecordsException",
    "ConstraintViolationError",
]
