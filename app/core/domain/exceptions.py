"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
Every error carries a stable machine-readable code and a human-readable message,
so callers (scheduler, CLI, HTTP adapters) can translate them without parsing text.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "CONSENT_DENIED")
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


class ValidationError(DomainException):
    """
    Raised when required input is missing or malformed.

    Never retried: the caller must fix the input.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class NotFoundError(DomainException):
    """
    Raised when a referenced entity does not exist.
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
            "NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DuplicateEntityError(DomainException):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any, code: str = "DUPLICATE_ENTITY"):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{value}' already exists",
            code,
            {
                "entity_type": entity_type,
                "field": field,
                "value": str(value),
            },
        )


class BusinessRuleViolationError(DomainException):
    """
    Raised when a business rule is violated.

    Use for invariant violations, precondition failures, etc.
    """

    def __init__(
        self,
        rule: str,
        message: str | None = None,
        code: str = "BUSINESS_RULE_VIOLATION",
        details: dict[str, Any] | None = None,
    ):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, code, details)


class GatewayError(DomainException):
    """
    Raised when the messaging provider rejects a request or the transport fails.

    When the provider answered with a structured error, its message, numeric
    code, type and trace id are preserved in ``details`` and as attributes.
    """

    def __init__(
        self,
        message: str,
        provider_code: int | None = None,
        provider_type: str | None = None,
        trace_id: str | None = None,
        status_code: int | None = None,
        code: str = "GATEWAY_ERROR",
        original_error: Exception | None = None,
    ):
        self.provider_code = provider_code
        self.provider_type = provider_type
        self.trace_id = trace_id
        self.status_code = status_code
        self.original_error = original_error
        details: dict[str, Any] = {}
        if provider_code is not None:
            details["provider_code"] = provider_code
        if provider_type:
            details["provider_type"] = provider_type
        if trace_id:
            details["trace_id"] = trace_id
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code, details)


class GatewayTimeoutError(GatewayError):
    """Raised when the messaging provider did not answer within the configured timeout."""

    def __init__(self, message: str, timeout: float | None = None, original_error: Exception | None = None):
        super().__init__(message, code="GATEWAY_TIMEOUT", original_error=original_error)
        self.timeout = timeout
        if timeout is not None:
            self.details["timeout_seconds"] = timeout


class StorageError(DomainException):
    """Raised when the persistence layer fails for reasons unrelated to a domain invariant."""

    def __init__(self, operation: str, message: str, original_error: Exception | None = None):
        self.operation = operation
        self.original_error = original_error
        details: dict[str, Any] = {"operation": operation}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "STORAGE_ERROR", details)
