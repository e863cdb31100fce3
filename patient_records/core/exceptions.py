"""
Exception hierarchy for the patient records service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PatientRecordsException(Exception):
    """Base exception for all patient records application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConstraintViolationError(PatientRecordsException):
    """Raised when a write breaks a store constraint (duplicate documento)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize constraint violation error.

        Args:
            message: Error message
            field: Column whose constraint was violated
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)
