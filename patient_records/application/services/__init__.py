"""Service orchestrators."""

from .patient_service import PatientService

__all__ = ["PatientService"]
