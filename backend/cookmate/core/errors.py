"""Error Hierarchy — typed, categorized exceptions for all CookMate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope consumed by the global handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CookmateError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Not-found and not-owned share one error on purpose: callers cannot probe for
      the existence of rows they do not own
    - LanguageServiceError is raised by the client but swallowed by the translator:
      translation is best-effort and never fails a request
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    retry_after_ms: int | None = None


class CookmateError(Exception):
    """Base exception for all CookMate errors."""

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

    def extra_fields(self) -> dict[str, Any]:
        """Error-specific payload merged into the response envelope."""
        return {}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        body.update(self.extra_fields())
        return {"error": body}


# ─── Request Errors (400-level) ─────────────────────────────────

class UnauthenticatedError(CookmateError):
    """Bearer token missing, malformed, expired or rejected."""
    def __init__(self, message: str = "Invalid token", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class UnsupportedLanguageError(CookmateError):
    """Language code outside the supported set."""
    def __init__(self, codes: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Unsupported language code: {', '.join(codes)}",
            "UNSUPPORTED_LANGUAGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.codes = codes


class PreconditionFailedError(CookmateError):
    """A workflow step was attempted before its prerequisite."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PRECONDITION_FAILED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


class VerificationIncompleteError(CookmateError):
    """Self-verification requested with an incomplete profile."""
    def __init__(
        self, basic_profile: bool, worker_profile: bool,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Please complete your profile before requesting verification",
            "VERIFICATION_INCOMPLETE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.basic_profile = basic_profile
        self.worker_profile = worker_profile

    def extra_fields(self) -> dict[str, Any]:
        return {
            "missing": {
                "basicProfile": self.basic_profile,
                "workerProfile": self.worker_profile,
            },
        }


class RoleForbiddenError(CookmateError):
    """Caller's role does not permit the action."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "ROLE_FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, context, 403,
        )


class NotFoundOrNotOwnedError(CookmateError):
    """Resource absent, or present but owned by someone else."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class ConflictError(CookmateError):
    """Uniqueness constraint violated."""
    def __init__(
        self, message: str, code: str = "CONFLICT",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class PhoneInUseError(ConflictError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Phone number already in use", "PHONE_IN_USE", context)


class ProfileConflictError(ConflictError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Profile already exists", "PROFILE_EXISTS", context)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CookmateError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class LanguageServiceError(CookmateError):
    """Anthropic API call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            f"Language service error ({api_error_type}): {message}",
            "LANGUAGE_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.api_error_type = api_error_type


class ConfigurationError(CookmateError):
    """Required startup configuration missing or invalid."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing or invalid configuration: {', '.join(fields)}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.fields = fields
