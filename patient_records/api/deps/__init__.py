"""API-specific dependencies."""

from .dependencies import get_patient_service

__all__ = ["get_patient_service"]
