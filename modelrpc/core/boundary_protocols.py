"""Boundary Protocols — contracts between the facade and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure/; dependency arrows point inward only
    - The facade sees services, locators and sessions only through these Protocols

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
"""

from typing import Any, Protocol

from modelrpc.core.domain_types import RawResult
from modelrpc.core.errors import ErrorContext


class ModelServiceLike(Protocol):
    """Remote "object" service: one generic call for every model operation."""
    def execute_kw(
        self,
        db: str,
        uid: int,
        password: str,
        model: str,
        operation: str,
        args: list,
        kwargs: dict[str, Any] | None = None,
    ) -> RawResult: ...


class ServiceLocator(Protocol):
    """Resolves a named remote endpoint to a service."""
    def resolve(self, endpoint_id: str) -> ModelServiceLike: ...


class SessionLike(Protocol):
    """Read-only session accessors consumed on every call."""
    @property
    def db(self) -> str: ...

    def uid(self) -> int: ...

    @property
    def password(self) -> str: ...

    @property
    def current_lang(self) -> str | None: ...


class ResponseNormalizer(Protocol):
    """Turns a RawResult into its payload or raises a typed error."""
    def __call__(
        self, raw: RawResult, context: ErrorContext | None = None,
    ) -> Any: ...
