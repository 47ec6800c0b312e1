"""Error Hierarchy — typed, categorized exceptions for every way a notification task can fail.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Precondition errors are raised before the provider is contacted
    - Provider errors keep the raw provider code on the context for diagnosis
    - Handled outcomes (user unreachable, transient) are never represented here
    - to_response() produces the REST envelope returned to the task scheduler

Design Decisions:
    - Single hierarchy with NotifierError base: FastAPI global handler catches all
    - FatalProviderError and UnknownProviderError stay distinct classes even though
      the scheduler treats them the same today
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and scheduler handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    PRECONDITION = "precondition"
    TRANSPORT = "transport"
    PROVIDER = "provider"
    SCHEDULING = "scheduling"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    username: str | None = None
    job_type: str | None = None
    provider_code: int | None = None
    debug_info: dict[str, Any] | None = None


class NotifierError(Exception):
    """Base exception for all notifier errors."""

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
                    "user_id": self.context.user_id,
                    "username": self.context.username,
                    "job_type": self.context.job_type,
                    "provider_code": self.context.provider_code,
                },
            }
        }


# ─── Precondition Errors (400-level) ────────────────────────────

class PreconditionError(NotifierError):
    """Task cannot start: its inputs or user context are not usable."""
    def __init__(
        self, message: str, code: str = "PRECONDITION_FAILED",
        context: ErrorContext | None = None, http_status: int = 422,
    ):
        super().__init__(
            message, code, ErrorCategory.PRECONDITION,
            ErrorSeverity.ERROR, context, http_status,
        )


class UserResolutionError(PreconditionError):
    """User record, credentials or locale could not be loaded."""
    def __init__(
        self, user_id: str, reason: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"Could not resolve user '{user_id}': {reason}",
            "USER_RESOLUTION_FAILED", ctx, 404,
        )
        self.user_id = user_id
        self.reason = reason


class InvalidTaskPayloadError(PreconditionError):
    """Job payload is missing fields or has the wrong types."""
    def __init__(
        self, job_type: str, details: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.job_type = job_type
        super().__init__(
            f"Invalid payload for job '{job_type}': {details}",
            "INVALID_TASK_PAYLOAD", ctx, 422,
        )


class UnknownTaskTypeError(PreconditionError):
    """No task runner registered for the job type."""
    def __init__(self, job_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.job_type = job_type
        super().__init__(
            f"Task type '{job_type}' does not exist.",
            "UNKNOWN_TASK_TYPE", ctx, 404,
        )


# ─── Provider & Infrastructure Errors (500-level) ───────────────

class TransportError(NotifierError):
    """Send failed without a structured provider error (network, timeout, garbage response)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Transport failure talking to messaging provider: {message}",
            "TRANSPORT_ERROR", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context, 502,
        )


class FatalProviderError(NotifierError):
    """Provider rejected the application itself (bad credentials, suspended app)."""
    def __init__(
        self, provider_code: int, reason: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.provider_code = provider_code
        super().__init__(
            reason, "FATAL_PROVIDER_ERROR", ErrorCategory.PROVIDER,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.provider_code = provider_code


class UnknownProviderError(NotifierError):
    """Provider returned a code nobody mapped yet."""
    def __init__(
        self, provider_code: int, provider_message: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.provider_code = provider_code
        super().__init__(
            f"An unexpected provider error occurred: {provider_code} {provider_message}",
            "UNKNOWN_PROVIDER_ERROR", ErrorCategory.PROVIDER,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.provider_code = provider_code
        self.provider_message = provider_message


class RetrySchedulingError(NotifierError):
    """Retry job could not be enqueued. Never retried itself."""
    def __init__(
        self, message: str, provider_code: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.provider_code = provider_code
        super().__init__(
            f"Failed to schedule retry after provider error {provider_code}: {message}",
            "RETRY_SCHEDULING_FAILED", ErrorCategory.SCHEDULING,
            ErrorSeverity.CRITICAL, ctx, 503,
        )


class DatabaseError(NotifierError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
