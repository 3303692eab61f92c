"""Error Hierarchy: typed, categorized exceptions for every Q&A failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - DAO errors describe what went wrong in storage (InvalidUUIDError, DatabaseError)
    - Handler errors describe what the client sees (BadRequestError, InternalError, RequestDataError)
    - to_response() produces the REST error envelope
    - InternalError never carries internal details in its message

Design Decisions:
    - Single hierarchy with QAError base: one FastAPI handler renders all of them
    - DAO errors are never rendered directly; handlers translate them first
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class QAError(Exception):
    """Base exception for all Q&A service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── DAO Errors ─────────────────────────────────────────────────

class InvalidUUIDError(QAError):
    """Identifier is malformed or references a row that does not exist."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_UUID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class DatabaseError(QAError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Handler Errors ─────────────────────────────────────────────

DEFAULT_INTERNAL_ERROR_MESSAGE = "Something went wrong! Please try again."


class BadRequestError(QAError):
    """Client sent something the service cannot act on."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InternalError(QAError):
    """Unexpected failure; the message is always safe to show."""
    def __init__(
        self,
        message: str = DEFAULT_INTERNAL_ERROR_MESSAGE,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class RequestDataError(QAError):
    """Request body or parameters failed schema validation."""
    def __init__(
        self,
        details: list[dict],
        message: str = "Invalid request data",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response
