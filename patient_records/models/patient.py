"""
Patient domain models and schemas.

Request/response schemas for patient record operations. Wire field names
follow the public JSON contract (camelCase ``fechaNacimiento``); Python
attributes use snake_case.

Dependencies: pydantic
System role: Patient API contracts
"""

import enum
from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class CreatePatientRequest(BaseModel):
    """Request schema for creating a new patient record."""

    model_config = ConfigDict(populate_by_name=True)

    nombre: str = Field(..., description="First name")
    apellido: str = Field(..., description="Last name")
    documento: str = Field(..., description="Document identifier (unique)")
    fecha_nacimiento: date = Field(
        ...,
        alias="fechaNacimiento",
        description="Date of birth (ISO-8601)",
    )
    tratamiento: str = Field(..., description="Current treatment")


class PatientResponse(BaseModel):
    """Response schema for patient record operations."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    nombre: str
    apellido: str
    documento: str
    fecha_nacimiento: date = Field(..., alias="fechaNacimiento")
    tratamiento: str


class DeleteOutcome(str, enum.Enum):
    """Result of deleting a patient by document identifier."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"

    @property
    def message(self) -> str:
        """Human-readable outcome returned over HTTP."""
        return _DELETE_MESSAGES[self]


_DELETE_MESSAGES = {
    DeleteOutcome.DELETED: "Paciente eliminado",
    DeleteOutcome.NOT_FOUND: "No existe",
}
