"""
Patient error handling utilities.

Provides a decorator for consistent error handling across patient
endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from patient_records.core.exceptions import ConstraintViolationError
from patient_records.observability.log_utils import log_patient_failure

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def _documento_of(kwargs: dict[str, Any]) -> str | None:
    """Document identifier from a path parameter or a create request body."""
    if "documento" in kwargs:
        return kwargs["documento"]
    return getattr(kwargs.get("request"), "documento", None)


def handle_patient_errors(func: F) -> F:
    """
    Decorator to handle patient-related errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (documento)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ConstraintViolationError as e:
            logger.warning(
                "Patient constraint violated",
                extra={"field": e.field}
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=e.message
            )

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors()
            )

        except Exception as e:
            log_patient_failure(
                logger,
                "Unexpected failure in patient operation",
                e,
                operation=func.__name__,
                documento=_documento_of(kwargs),
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during patient operation"
            )

    return wrapper  # type: ignore
