"""
Patient ORM model.

Represents one patient's stored attributes, keyed by an auto-increment
surrogate id and a unique document identifier.

Dependencies: sqlalchemy, patient_records.boundary.db.base
System role: Patient record persistence
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from patient_records.boundary.db.base import Base


class PatientModel(Base):
    """
    Patient ORM model.

    Attributes:
        id: Integer primary key (assigned by the database on insert)
        nombre: First name
        apellido: Last name
        documento: External document identifier, unique across all rows
        fecha_nacimiento: Date of birth
        tratamiento: Free-text current treatment (mutable)
    """

    __tablename__ = "pacientes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    nombre: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="First name",
    )

    apellido: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Last name",
    )

    documento: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        doc="Document identifier (natural key)",
    )

    fecha_nacimiento: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        doc="Date of birth",
    )

    tratamiento: Mapped[str] = mapped_column(
        String(4096),
        nullable=False,
        doc="Current treatment",
    )

    def __repr__(self) -> str:
        return f"<PatientModel id={self.id} documento={self.documento!r}>"
