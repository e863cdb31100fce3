"""
Logging helpers for patient data.

Log records may name an operation and a masked document identifier. Names,
birth dates and treatments never reach the logs.

Dependencies: logging (stdlib)
System role: Redaction and failure logging for patient operations
"""

import logging

VISIBLE_DOCUMENTO_CHARS = 2


def mask_documento(documento: str | None) -> str | None:
    """
    Mask a document identifier, keeping only its last characters.

    >>> mask_documento("12345678")
    '***78'
    """
    if documento is None:
        return None
    if len(documento) <= VISIBLE_DOCUMENTO_CHARS:
        return "***"
    return "***" + documento[-VISIBLE_DOCUMENTO_CHARS:]


def log_patient_failure(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    *,
    operation: str,
    documento: str | None = None,
) -> None:
    """
    Log an unexpected failure of a patient operation.

    The exception text is left out: driver errors echo the bound row values.
    The traceback is attached only when DEBUG is enabled.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        operation: Name of the failing operation (e.g. ``create_patient``)
        documento: Document identifier of the affected patient, if any
    """
    logger.error(
        message,
        exc_info=exc if logger.isEnabledFor(logging.DEBUG) else None,
        extra={
            "operation": operation,
            "documento": mask_documento(documento),
            "error_type": type(exc).__name__,
        },
    )
