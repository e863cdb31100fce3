"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, patient_records.observability
System role: Request/response observability injection
"""

import logging
import re
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from patient_records.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)
from patient_records.observability.log_utils import mask_documento

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

PATIENT_PATH = re.compile(r"^(?P<route>/pacientes/[^/]+/)(?P<documento>[^/]+)$")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with status and duration.

    The document identifier in ``/pacientes/<action>/<documento>`` paths is
    masked and the query string (which carries ``tratamiento``) is never logged.
    """

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = redact_path(request.url.path)
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{method} {path} failed",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": _elapsed_ms(started),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            f"{method} {path} -> {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return response


def redact_path(path: str) -> str:
    """Mask the documento segment of a patient route path."""
    match = PATIENT_PATH.match(path)
    if match is None:
        return path
    return match.group("route") + mask_documento(match.group("documento"))


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
