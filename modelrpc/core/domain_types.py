"""Domain Types — value objects shared by the shaper, dispatcher and normalizer.

Invariants:
    - Credentials always carry the full (db, uid, password) triple
    - OperationDescriptor keeps positional args (list) and keyword args (dict) apart
    - OperationDescriptor.kwargs is None when no keyword mapping is sent, not {}
    - RawResult is interpreted only by the response normalizer

Design Decisions:
    - Frozen dataclasses: built once per call, never mutated
    - str Enums for permissions: they go over the wire as plain strings
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from modelrpc.core.errors import CredentialsError


# ─── Endpoints & Fixed Targets ───────────────────────────────────

MODEL_ENDPOINT = "object"

TRANSLATION_MODEL = "ir.translation"
TRANSLATE_FIELDS_OPERATION = "translate_fields"
PRODUCT_TEMPLATE_MODEL = "product.template"
ACTION_ARCHIVE_OPERATION = "action_archive"


class Permission(str, Enum):
    """Access modes accepted by check_access_rights."""
    READ = "read"
    WRITE = "write"
    CREATE = "create"
    UNLINK = "unlink"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class Credentials:
    """(db, uid, password) triple sent with every remote call."""
    db: str
    uid: int
    password: str = field(repr=False)

    def __post_init__(self):
        missing = []
        if not self.db:
            missing.append("db")
        if not isinstance(self.uid, int) or isinstance(self.uid, bool) or self.uid <= 0:
            missing.append("uid")
        if not self.password:
            missing.append("password")
        if missing:
            raise CredentialsError(missing)


@dataclass(frozen=True)
class OperationDescriptor:
    """One execute_kw-style call: target model/operation plus shaped arguments."""
    model: str
    operation: str
    args: list = field(default_factory=list)
    kwargs: dict[str, Any] | None = None


@dataclass(frozen=True)
class RawResult:
    """Opaque outcome of a remote call."""
    payload: Any = None
    fault_code: int | str | None = None
    fault_string: str | None = None
    status_code: int = 200
    reason: str = ""
    headers: dict[str, str] | None = None

    @property
    def is_fault(self) -> bool:
        return self.fault_code is not None or self.fault_string is not None
