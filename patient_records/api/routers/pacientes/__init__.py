"""
Pacientes router package.

Exports the router for patient record endpoints.
"""

from .pacientes_router import router

__all__ = ["router"]
