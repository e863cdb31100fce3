"""API routers."""

from .health import router as health_router
from .pacientes import router as pacientes_router

__all__ = [
    "health_router",
    "pacientes_router",
]
