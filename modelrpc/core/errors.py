"""Error Hierarchy — typed, categorized exceptions for every modelrpc failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Remote outcome errors (AuthError, ResponseFaultError, ResponseStatusError) are
      raised only by the response normalizer and reach the caller unwrapped
    - to_response() produces a plain dict envelope for logging or re-serialization

Design Decisions:
    - Single hierarchy with ModelRpcError base: callers catch one type for everything
    - Fault vs. status split: a fault is an application-level rejection from the
      model layer, a status error is a transport-level non-success outcome
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    AUTH = "auth"
    REMOTE_FAULT = "remote_fault"
    TRANSPORT = "transport"


@dataclass
class ErrorContext:
    """Which remote call produced the error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    model: str | None = None
    operation: str | None = None
    endpoint: str | None = None
    debug_info: dict[str, Any] | None = None


class ModelRpcError(Exception):
    """Base exception for all modelrpc errors."""

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

    def to_response(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "model": self.context.model,
                    "operation": self.context.operation,
                    "endpoint": self.context.endpoint,
                },
            }
        }


# ─── Local Errors ───────────────────────────────────────────────

class CredentialsError(ModelRpcError):
    """Credentials triple is incomplete."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Incomplete credentials, missing: {', '.join(missing)}",
            "CREDENTIALS_INCOMPLETE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.missing = missing


class UnknownEndpointError(ModelRpcError):
    """Service locator has no service registered for the endpoint."""
    def __init__(self, endpoint: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.endpoint = endpoint
        super().__init__(
            f"No service registered for endpoint '{endpoint}'",
            "UNKNOWN_ENDPOINT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.endpoint = endpoint


# ─── Remote Outcome Errors ──────────────────────────────────────

class AuthError(ModelRpcError):
    """Credentials or access rights rejected by the remote side. Never retried."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTH_REJECTED", ErrorCategory.AUTH,
            ErrorSeverity.ERROR, context,
        )


class ResponseError(ModelRpcError):
    """Remote call completed with a non-success outcome."""


class ResponseFaultError(ResponseError):
    """Remote operation executed but reported an application-level fault."""
    def __init__(
        self,
        fault_code: int | str | None,
        fault_string: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Remote fault ({fault_code}): {fault_string}",
            "REMOTE_FAULT", ErrorCategory.REMOTE_FAULT,
            ErrorSeverity.ERROR, context,
        )
        self.fault_code = fault_code
        self.fault_string = fault_string


class ResponseStatusError(ResponseError):
    """Transport replied with a non-success status."""
    def __init__(
        self, status_code: int, reason: str = "", context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Unexpected response status {status_code}"
            + (f": {reason}" if reason else ""),
            "BAD_STATUS", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context,
        )
        self.status_code = status_code
        self.reason = reason
