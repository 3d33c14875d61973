"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They are caught and translated to HTTP responses in the API layer.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    Every error is scoped to the single operation that raised it.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Always raised before any call to the record store.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class RecurrenceCapacityException(ValidationException):
    """Raised when a recurrence would expand past the per-insert cap."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Ricorrenza troppo ampia: {count} appuntamenti. Riduci l'intervallo o i giorni selezionati.",
            field="recurrence",
            details={"count": count, "limit": limit},
        )
        self.code = "RECURRENCE_CAPACITY_EXCEEDED"


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class RecordStoreException(DomainException):
    """Raised when the record store rejects an operation.

    The store's own message is carried verbatim so it can be shown to the user.
    """

    def __init__(self, message: str, operation: str | None = None, table: str | None = None):
        self.operation = operation
        self.table = table
        details: dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, "RECORD_STORE_ERROR", details)


class ReferenceException(DomainException):
    """Raised when a referenced resource is missing (patient, phone number).

    Reported to the user as a warning, never treated as a crash.
    """

    def __init__(self, resource: str, message: str):
        self.resource = resource
        super().__init__(message, "REFERENCE_ERROR", {"resource": resource})
