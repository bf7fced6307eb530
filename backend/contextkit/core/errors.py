"""Error Hierarchy — typed, categorized exceptions for contextkit failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError.errors is an ordered tuple: empty for single-field failures,
      one message per failed check for aggregate failures
    - field/errors on ValidationError are read-only once constructed
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ContextKitError base: FastAPI global handler catches all
    - is_validation_error() lets callers test for validation failures without
      importing the concrete class into their own error handling
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class ContextKitError(Exception):
    """Base exception for all contextkit errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def details(self) -> dict[str, Any] | None:
        """Extra payload rendered under error.details (None when absent)."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
                "details": self.details(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(ContextKitError):
    """Input failed one or more field-level checks."""

    def __init__(self, message: str, field: str, errors: Iterable[str] = ()):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self._field = field
        self._errors = tuple(errors)

    @property
    def field(self) -> str:
        return self._field

    @property
    def errors(self) -> tuple[str, ...]:
        return self._errors

    def details(self) -> dict[str, Any]:
        return {"field": self._field, "errors": list(self._errors)}

    def __repr__(self) -> str:
        return (
            f"ValidationError(message={self.message!r}, field={self._field!r}, "
            f"errors={self._errors!r})"
        )


class SchemaNotFoundError(ContextKitError):
    """No aggregate validator is registered for the requested subject."""
    def __init__(self, subject: str):
        super().__init__(
            f"No validation schema named '{subject}'",
            "SCHEMA_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, 404,
        )
        self.subject = subject


def is_validation_error(error: object) -> bool:
    """True when `error` is a contextkit ValidationError."""
    return isinstance(error, ValidationError)
