"""Model Dispatch — one method per remote model operation, all funnelled through execute_kw.

Invariants:
    - Every call sends the session's full (db, uid, password) triple
    - Every named method = shape (core/shape_arguments) → dispatch → normalize
    - Exactly one outbound remote call per invocation; nothing cached
    - Normalizer errors (AuthError, ResponseFaultError, ResponseStatusError)
      propagate unchanged, with no wrapping and no local recovery
    - Locale context read from the session at call time, never written

Design Decisions:
    - Session and locator injected at construction; ModelDispatch sees only
      their Protocols (core/boundary_protocols)
    - Normalizer injectable for callers that want a different unwrap policy
    - The splat-style `execute` variant is deliberately absent: only the
      execute_kw shape is supported
"""

import logging
from typing import Any, Sequence

from modelrpc.core.boundary_protocols import (
    ModelServiceLike,
    ResponseNormalizer,
    ServiceLocator,
    SessionLike,
)
from modelrpc.core.domain_types import MODEL_ENDPOINT, OperationDescriptor, Permission
from modelrpc.core.errors import ErrorContext
from modelrpc.core.normalize_response import normalize_response
from modelrpc.core import shape_arguments as shape

logger = logging.getLogger(__name__)


class ModelDispatch:
    """Typed facade over the remote "object" endpoint."""

    def __init__(
        self,
        session: SessionLike,
        locator: ServiceLocator,
        normalizer: ResponseNormalizer = normalize_response,
    ):
        self._session = session
        self._locator = locator
        self._normalize = normalizer

    @property
    def session(self) -> SessionLike:
        return self._session

    def get_model_service(self) -> ModelServiceLike:
        return self._locator.resolve(MODEL_ENDPOINT)

    def dispatch(self, descriptor: OperationDescriptor) -> Any:
        """Send one shaped operation and return its normalized payload."""
        logger.debug(
            f"Dispatching {descriptor.model}.{descriptor.operation}",
            extra={"model": descriptor.model, "operation": descriptor.operation},
        )
        raw = self.get_model_service().execute_kw(
            self._session.db, self._session.uid(), self._session.password,
            descriptor.model,
            descriptor.operation,
            descriptor.args,
            descriptor.kwargs,
        )
        context = ErrorContext(
            model=descriptor.model,
            operation=descriptor.operation,
            endpoint=MODEL_ENDPOINT,
        )
        return self._normalize(raw, context)

    # ─── Generic ─────────────────────────────────────────────────

    def execute_kw(
        self,
        model: str,
        operation: str,
        args: Sequence | None = None,
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        """Call any model method with explicit positional and keyword args."""
        return self.dispatch(shape.shape_execute_kw(model, operation, args, kwargs))

    # ─── Access ──────────────────────────────────────────────────

    def check_access_rights(
        self,
        model: str,
        permission: Permission | str | Sequence[Permission | str] = Permission.READ,
        with_exceptions: bool = False,
    ) -> bool:
        """Whether the session user holds `permission` on `model`.

        With with_exceptions=True the server raises instead of answering False,
        which surfaces here as AuthError.
        """
        return bool(self.dispatch(
            shape.shape_check_access_rights(model, permission, with_exceptions),
        ))

    # ─── Search family ───────────────────────────────────────────

    def search(
        self,
        model: str,
        criteria: list | None = None,
        offset: int = 0,
        limit: int = 0,
        order: str = "",
    ) -> list[int]:
        """Ids of records matching the domain `criteria`. limit=0 means no limit."""
        return self.dispatch(shape.shape_search(
            model, criteria, offset, limit, order,
            lang=self._session.current_lang,
        ))

    def search_count(self, model: str, criteria: list | None = None) -> int:
        return self.dispatch(shape.shape_search_count(model, criteria))

    def search_read(
        self,
        model: str,
        criteria: list,
        fields: list[str] | None = None,
        limit: int = 0,
        order: str = "",
    ) -> list[dict]:
        """Search and read in one round trip; empty `fields` reads every field."""
        return self.dispatch(shape.shape_search_read(
            model, criteria, fields, limit, order,
            lang=self._session.current_lang,
        ))

    # ─── Read / metadata ─────────────────────────────────────────

    def read(
        self, model: str, ids: list[int], fields: list[str] | None = None,
    ) -> list[dict]:
        return self.dispatch(shape.shape_read(model, ids, fields))

    def fields_get(
        self,
        model: str,
        fields: list[str] | None = None,
        attributes: list[str] | None = None,
    ) -> dict[str, dict]:
        """Field definitions of `model`, keyed by field name."""
        return self.dispatch(shape.shape_fields_get(model, fields, attributes))

    # ─── Mutations ───────────────────────────────────────────────

    def create(self, model: str, data: dict[str, Any]) -> int:
        return self.dispatch(shape.shape_create(model, data))

    def write(self, model: str, ids: list[int], fields: dict[str, Any]) -> bool:
        return self.dispatch(shape.shape_write(model, ids, fields))

    def unlink(self, model: str, ids: list[int]) -> bool:
        return self.dispatch(shape.shape_unlink(model, ids))

    # ─── Fixed-target helpers ────────────────────────────────────

    def translate_field(self, model: str, template_id: int, field: str) -> Any:
        """Translation entries of `field` on record `template_id` of `model`."""
        return self.dispatch(shape.shape_translate_field(model, template_id, field))

    def action_archive(self, template_id: int, company_id: int) -> Any:
        """Archive a product template within the given company."""
        return self.dispatch(shape.shape_action_archive(template_id, company_id))
