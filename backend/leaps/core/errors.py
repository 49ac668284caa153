"""Error Hierarchy — typed, categorized exceptions for LEAPS payload handling.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are recoverable; contract violations (500-level) are defects
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LeapsError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Parse functions never raise these; only the service shell (bad input) and the
      dispatchers (contract violations) do
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from leaps.core.parse_result import FieldIssue


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    activity_code: str | None = None
    trace_id: str | None = None


class LeapsError(Exception):
    """Base exception for all LEAPS payload errors."""

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
                "context": {
                    "activity_code": self.context.activity_code,
                    "trace_id": self.context.trace_id,
                },
            }
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class PayloadValidationError(LeapsError):
    """Inbound payload failed its shape schema."""
    def __init__(
        self,
        issues: tuple[FieldIssue, ...],
        message: str = "Invalid payload for selected activity",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.issues = issues

    def to_response(self, include_details: bool = True) -> dict:
        response = super().to_response()
        if include_details:
            response["error"]["details"] = [i.to_dict() for i in self.issues]
        return response


# ─── Contract Violations (500-level) ────────────────────────────

class UnknownActivityCodeError(LeapsError):
    """Dispatcher received an envelope whose activityCode it has no route for."""
    def __init__(self, activity_code: object, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown activity code: {activity_code!r}",
            "UNKNOWN_ACTIVITY_CODE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.activity_code = activity_code


class PayloadShapeMismatchError(LeapsError):
    """Envelope data is not the model its activityCode requires."""
    def __init__(
        self, activity_code: str, expected: str, received: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{activity_code} envelope carries {received}, expected {expected}",
            "PAYLOAD_SHAPE_MISMATCH", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.activity_code = activity_code
        self.expected = expected
        self.received = received
