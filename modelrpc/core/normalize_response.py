"""Response Normalization — maps a RawResult to its payload or a typed error.

Invariants:
    - Pure: inspects the RawResult, never retries, never logs
    - Order: auth fault → other fault → auth status → bad status → payload
    - A successful payload is returned unchanged (falsy payloads included)

Design Decisions:
    - Fault codes 3 (access denied) and 4 (access error) follow the server's
      XML-RPC fault numbering; older servers put the exception name in the
      fault string instead, so both are checked
"""

from typing import Any

from modelrpc.core.domain_types import RawResult
from modelrpc.core.errors import (
    AuthError,
    ErrorContext,
    ResponseFaultError,
    ResponseStatusError,
)


AUTH_FAULT_CODES: frozenset[int | str] = frozenset({3, 4, "3", "4", "AccessDenied"})
AUTH_FAULT_MARKERS: tuple[str, ...] = ("AccessDenied", "AccessError", "Access Denied")
AUTH_STATUS_CODES: frozenset[int] = frozenset({401, 403})


def is_auth_fault(raw: RawResult) -> bool:
    if raw.fault_code in AUTH_FAULT_CODES:
        return True
    text = raw.fault_string or ""
    return any(marker in text for marker in AUTH_FAULT_MARKERS)


def normalize_response(raw: RawResult, context: ErrorContext | None = None) -> Any:
    """Return the payload of a successful call, raise the matching error otherwise."""
    if raw.is_fault:
        if is_auth_fault(raw):
            raise AuthError(
                f"Access rejected: {raw.fault_string or raw.fault_code}",
                context=context,
            )
        raise ResponseFaultError(
            raw.fault_code, raw.fault_string or "", context=context,
        )

    if raw.status_code in AUTH_STATUS_CODES:
        raise AuthError(
            f"Access rejected with status {raw.status_code}", context=context,
        )
    if not 200 <= raw.status_code < 300:
        raise ResponseStatusError(raw.status_code, raw.reason, context=context)

    return raw.payload
