"""Error Hierarchy — typed, categorized exceptions for the resolver's HTTP shell.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Target resolution itself never raises: these errors only cover explicit
      caller input (pinned targets, build-path requests)
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EsmTargetError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    user_agent: str | None = None


class EsmTargetError(Exception):
    """Base exception for all resolver errors."""

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
                    "path": self.context.path,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidTargetError(EsmTargetError):
    """Caller pinned a target that is not one of the known labels."""
    def __init__(self, target: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown build target '{target}'",
            "INVALID_TARGET", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.target = target


class InvalidBuildRequestError(EsmTargetError):
    """Build artifact path cannot be formed from the given inputs."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_BUILD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field
