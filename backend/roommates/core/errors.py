"""Error Hierarchy — typed, categorized exceptions for every shell-level failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages
    - Pure core functions (filter_profiles, enforce_membership) never raise these

Design Decisions:
    - Single hierarchy with RoommatesError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    group_id: str | None = None
    membership_id: str | None = None
    action: str | None = None
    debug_info: dict[str, Any] | None = None


class RoommatesError(Exception):
    """Base exception for all application errors."""

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
                    "group_id": self.context.group_id,
                    "membership_id": self.context.membership_id,
                    "action": self.context.action,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationRequiredError(RoommatesError):
    """No (or an unknown) user identity on the request."""
    def __init__(self, message: str = "Authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ProfileRequiredError(RoommatesError):
    """User has not completed profile setup."""
    def __init__(self, setup_url: str, context: ErrorContext | None = None):
        super().__init__(
            "Complete your profile before managing a group.",
            "PROFILE_REQUIRED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 403,
        )
        self.setup_url = setup_url

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["setup_url"] = self.setup_url
        return response


class ActionNotPermittedError(RoommatesError):
    """A membership action was rejected by core/enforce_membership.py."""
    def __init__(self, error_code: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, error_code, ErrorCategory.PERMISSION,
            ErrorSeverity.ERROR, context, 403,
        )

    @classmethod
    def from_check(cls, error: dict, context: ErrorContext | None = None) -> "ActionNotPermittedError":
        """Build from the error dict returned by an enforce_membership check."""
        return cls(error["error_code"], error["message"], context)


class AlreadyInGroupError(RoommatesError):
    """User already belongs to a roommate group."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "You already belong to a roommate group.",
            "ALREADY_IN_GROUP", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class ResourceNotFoundError(RoommatesError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RoommatesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
