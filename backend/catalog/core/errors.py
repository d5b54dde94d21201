"""Error Hierarchy: typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level; storage errors are 500-level
    - to_response() produces the {"success": false, "error": ...} envelope
    - Underlying cause messages only appear in responses when explicitly requested

Design Decisions:
    - Single hierarchy with CatalogError base: one global handler catches all
    - ErrorContext as dataclass: operation timing travels with the error to the handler's log line
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    STORAGE = "storage"
    STARTUP = "startup"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    elapsed_ms: float | None = None
    record_count: int | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

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

    def to_response(self, include_details: bool = False) -> dict:
        """Convert to the client-facing error envelope."""
        body: dict[str, Any] = {"success": False, "error": self.message}
        details = (self.context.debug_info or {}).get("cause")
        if include_details and details:
            body["details"] = details
        return body

    def log_extra(self) -> dict:
        """Structured fields for the server-side log line."""
        return {
            "error_code": self.code,
            "operation": self.context.operation,
            "elapsed_ms": self.context.elapsed_ms,
            "record_count": self.context.record_count,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class ValidationError(CatalogError):
    """Request payload does not have the required shape."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_response(self, include_details: bool = False) -> dict:
        body = {"success": False, "error": self.message}
        if self.field:
            body["field"] = self.field
        return body


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(CatalogError):
    """Database operation failed."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class StartupError(CatalogError):
    """Process cannot start: database unreachable or seed data invalid."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STARTUP_ERROR", ErrorCategory.STARTUP,
            ErrorSeverity.CRITICAL, context, 500,
        )
