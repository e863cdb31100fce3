"""
Patient record API endpoints.

Routes:
- POST /pacientes/crear - Create patient
- GET /pacientes/listar - List all patients
- GET /pacientes/buscar/{documento} - Get patient by document (null if absent)
- PUT /pacientes/actualizarTratamiento/{documento}?tratamiento= - Update treatment (null if absent)
- DELETE /pacientes/eliminar/{documento} - Delete patient (plain-text outcome)

Dependencies: patient_records.application.services, patient_records.models
System role: Patient record HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from patient_records.application.services.patient_service import PatientService
from patient_records.api.deps.dependencies import get_patient_service
from patient_records.models.common import ErrorResponse
from patient_records.models.patient import CreatePatientRequest, PatientResponse
from patient_records.observability.log_utils import mask_documento

from .patient_error_handling import handle_patient_errors
from .patient_responses import map_patient_to_response, map_patients_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pacientes", tags=["pacientes"])


@router.post(
    "/crear",
    response_model=PatientResponse,
    responses={409: {"model": ErrorResponse}},
)
@handle_patient_errors
async def create_patient(
    request: CreatePatientRequest,
    patient_service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    """
    Create a new patient record.

    Args:
        request: CreatePatientRequest with nombre, apellido, documento, fechaNacimiento, tratamiento
        patient_service: Injected PatientService

    Returns:
        PatientResponse: Created patient including its id

    Raises:
        HTTPException(409): documento already exists
        HTTPException(500): Creation failed
    """
    logger.info("Creating patient", extra={"documento": mask_documento(request.documento)})

    patient = await patient_service.create_patient(request)

    return map_patient_to_response(patient)


@router.get("/listar", response_model=list[PatientResponse])
@handle_patient_errors
async def list_patients(
    patient_service: PatientService = Depends(get_patient_service),
) -> list[PatientResponse]:
    """
    List every patient record.

    Args:
        patient_service: Injected PatientService

    Returns:
        list[PatientResponse]: All patients (empty list when none exist)
    """
    patients = await patient_service.list_patients()

    logger.info("Patients retrieved", extra={"count": len(patients)})

    return map_patients_to_response(patients)


@router.get("/buscar/{documento}", response_model=PatientResponse | None)
@handle_patient_errors
async def find_patient(
    documento: str,
    patient_service: PatientService = Depends(get_patient_service),
) -> PatientResponse | None:
    """
    Get patient by document identifier.

    Args:
        documento: Document identifier
        patient_service: Injected PatientService

    Returns:
        PatientResponse | None: Patient, or JSON null if absent
    """
    patient = await patient_service.find_by_document(documento)
    return map_patient_to_response(patient)


@router.put("/actualizarTratamiento/{documento}", response_model=PatientResponse | None)
@handle_patient_errors
async def update_treatment(
    documento: str,
    tratamiento: str = Query(..., description="New treatment"),
    patient_service: PatientService = Depends(get_patient_service),
) -> PatientResponse | None:
    """
    Replace a patient's treatment.

    Args:
        documento: Document identifier
        tratamiento: New treatment (query parameter)
        patient_service: Injected PatientService

    Returns:
        PatientResponse | None: Updated patient, or JSON null if absent
    """
    logger.info("Updating patient treatment", extra={"documento": mask_documento(documento)})

    patient = await patient_service.update_treatment(documento, tratamiento)
    return map_patient_to_response(patient)


@router.delete("/eliminar/{documento}", response_class=PlainTextResponse)
@handle_patient_errors
async def delete_patient(
    documento: str,
    patient_service: PatientService = Depends(get_patient_service),
) -> PlainTextResponse:
    """
    Delete patient by document identifier.

    Args:
        documento: Document identifier
        patient_service: Injected PatientService

    Returns:
        PlainTextResponse: "Paciente eliminado" or "No existe"
    """
    outcome = await patient_service.delete_patient(documento)

    logger.info(
        "Patient delete processed",
        extra={"documento": mask_documento(documento), "outcome": outcome.value}
    )

    return PlainTextResponse(outcome.message)
