"""
Database models package.

Exports:
  - PatientModel: Patient record ORM model

Dependencies: sqlalchemy, patient_records.boundary.db.base
System role: Database model definitions for domain entities
"""

from patient_records.boundary.db.models.patient_model import PatientModel

__all__ = ["PatientModel"]
