"""
Patient response mapping utilities.

Transforms ORM models into Pydantic response models.

Dependencies: patient_records.models.patient
System role: Patient response transformation
"""

from typing import Sequence

from patient_records.boundary.db.models.patient_model import PatientModel
from patient_records.models.patient import PatientResponse


def map_patient_to_response(patient: PatientModel | None) -> PatientResponse | None:
    """
    Transform a patient ORM row into PatientResponse.

    Args:
        patient: Patient row, or None when the lookup found nothing

    Returns:
        PatientResponse | None: Response model, None passes through as JSON null
    """
    if patient is None:
        return None
    return PatientResponse.model_validate(patient)


def map_patients_to_response(patients: Sequence[PatientModel]) -> list[PatientResponse]:
    """
    Transform patient rows into a list of PatientResponse.

    Args:
        patients: Patient rows

    Returns:
        list[PatientResponse]: Response models in store order
    """
    return [PatientResponse.model_validate(patient) for patient in patients]
