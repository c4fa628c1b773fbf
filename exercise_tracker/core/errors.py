"""Error Hierarchy: typed, categorized exceptions for every Exercise Tracker failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; server errors (500-level) are critical
    - to_response() produces the REST envelope {"error": <message>}
    - ServerError never carries internal detail in its public message

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: one FastAPI handler renders all
      (ADR: uniform error shape)
    - DatabaseError keeps operation/detail as attributes for logs only
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class ExerciseTrackerError(Exception):
    """Base exception for all Exercise Tracker errors."""

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

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(ExerciseTrackerError):
    """Required input missing or malformed."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class NotFoundError(ExerciseTrackerError):
    """Referenced resource does not exist."""
    def __init__(self, resource_type: str = "User", resource_id: str | None = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Server Errors (500-level) ──────────────────────────────────

class ServerError(ExerciseTrackerError):
    """Persistence or unexpected failure. Public message is always generic."""
    def __init__(
        self,
        code: str = "SERVER_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(
            "Server error", code, category, ErrorSeverity.CRITICAL, 500,
        )


class DatabaseError(ServerError):
    """Database operation failed."""
    def __init__(self, detail: str, operation: str):
        super().__init__("DATABASE_ERROR", ErrorCategory.DATABASE)
        self.detail = detail
        self.operation = operation

    def __str__(self) -> str:
        return f"Database {self.operation} failed: {self.detail}"
