"""Error Hierarchy — typed, categorized exceptions for every store failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (not found, duplicate, validation) are recoverable by the caller
    - StorageError is the only infrastructure error and is never re-wrapped
    - to_dict() produces the same envelope for every error kind

Design Decisions:
    - Single hierarchy with TalentFlowError base: callers can catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    table: str | None = None
    record_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class TalentFlowError(Exception):
    """Base exception for all TalentFlow store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a plain error envelope for collaborators."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "table": self.context.table,
                    "record_id": self.context.record_id,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ValidationError(TalentFlowError):
    """Caller-supplied data failed a structural precondition."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class NotFoundError(TalentFlowError):
    """Referenced record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateError(TalentFlowError):
    """A uniqueness invariant would be violated."""
    def __init__(
        self,
        resource_type: str,
        key: str,
        code: str = "DUPLICATE",
        message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"{resource_type} with key '{key}' already exists",
            code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )
        self.resource_type = resource_type
        self.key = key


class DuplicateSlugError(DuplicateError):
    """No free slug suffix was found within the probe budget."""
    def __init__(self, base_slug: str, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            "Job", base_slug, "DUPLICATE_SLUG",
            f"No unique slug for '{base_slug}' after {attempts} attempts",
            context,
        )
        self.attempts = attempts


class DuplicateApplicationError(DuplicateError):
    """Candidate has already applied to this job."""
    def __init__(
        self, candidate_id: str, job_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            "JobApplication", f"{candidate_id}:{job_id}",
            "DUPLICATE_APPLICATION",
            f"Candidate '{candidate_id}' has already applied to job '{job_id}'",
            context,
        )
        self.candidate_id = candidate_id
        self.job_id = job_id


# ─── Infrastructure Errors ──────────────────────────────────────

class StorageError(TalentFlowError):
    """Storage engine operation failed (timeout, quota, corruption, I/O)."""
    def __init__(
        self,
        message: str,
        operation: str,
        reason: str = "io",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
        self.reason = reason
