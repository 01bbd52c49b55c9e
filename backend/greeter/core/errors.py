"""Error Hierarchy: typed, categorized exceptions for greeter failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GreeterError base: one FastAPI handler catches all
    - ProviderError subsumes transport and payload failures; `failure` keeps the
      distinction for logs only
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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    provider_url: str | None = None
    debug_info: dict[str, Any] | None = None


class GreeterError(Exception):
    """Base exception for all greeter errors."""

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
                    "provider_url": self.context.provider_url,
                },
            }
        }

    def log_extras(self) -> dict[str, Any]:
        """Structured logging fields describing this error."""
        return {"error_code": self.code}


class ProviderError(GreeterError):
    """Joke provider could not deliver a joke (transport, status or payload)."""

    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_PAYLOAD = "malformed_payload"
    EMPTY_JOKE = "empty_joke"

    def __init__(
        self, message: str, failure: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Joke provider unavailable ({failure}): {message}",
            "JOKE_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.failure = failure

    def log_extras(self) -> dict[str, Any]:
        return {**super().log_extras(), "failure": self.failure}
