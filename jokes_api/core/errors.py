"""Error Hierarchy: typed, categorized exceptions for every failure mode of the proxy.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Upstream failures map to gateway statuses (502, 504), never to a hung request
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with JokesApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    upstream_path: str | None = None
    upstream_status: int | None = None


class JokesApiError(Exception):
    """Base exception for all Jokes API errors."""

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
                    "upstream_path": self.context.upstream_path,
                    "upstream_status": self.context.upstream_status,
                },
            }
        }


# ─── Upstream Errors (gateway-level) ────────────────────────────

class UpstreamUnavailableError(JokesApiError):
    """Upstream joke API unreachable or answered with a non-2xx status."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream joke API unavailable: {reason}",
            "UPSTREAM_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.reason = reason


class UpstreamTimeoutError(JokesApiError):
    """Upstream joke API did not answer within the configured timeout."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream joke API timed out after {timeout_seconds:g}s",
            "UPSTREAM_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, context, 504,
        )
        self.timeout_seconds = timeout_seconds


class MalformedUpstreamBodyError(JokesApiError):
    """Upstream body is not JSON, not an object, or has no 'value' field."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Malformed upstream response: {reason}",
            "MALFORMED_UPSTREAM_BODY", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.reason = reason
