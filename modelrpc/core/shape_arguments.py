"""Argument Shaping — per-operation rules turning caller arguments into an OperationDescriptor.

Invariants:
    - Every function is PURE: no IO, no session access (locale passed in explicitly)
    - Positional args are always a list; keyword args are a dict or None (nothing sent)
    - context is added only when there is something to put in it, never {} or None
    - Rules are irregular on purpose and stay one function per operation:
        * check_access_rights wraps a scalar permission into [permission]
        * fields_get sends `fields` as the positional list itself, not [fields]
        * write sends [ids, fields] in that order
        * translate_field and action_archive target fixed models

Design Decisions:
    - Shaping separated from dispatch: each rule is testable without a service
"""

from typing import Any, Sequence

from modelrpc.core.domain_types import (
    ACTION_ARCHIVE_OPERATION,
    PRODUCT_TEMPLATE_MODEL,
    TRANSLATE_FIELDS_OPERATION,
    TRANSLATION_MODEL,
    OperationDescriptor,
    Permission,
)


def _with_lang(kwargs: dict[str, Any], lang: str | None) -> dict[str, Any]:
    """Attach {context: {lang}} only when a locale is set."""
    if lang:
        kwargs["context"] = {"lang": lang}
    return kwargs


def _permission_value(permission: Permission | str) -> str:
    # xmlrpc.client refuses str subclasses, so enums go out as plain strings
    if isinstance(permission, Permission):
        return permission.value
    return permission


# ─── Generic ─────────────────────────────────────────────────────

def shape_execute_kw(
    model: str,
    operation: str,
    args: Sequence | None = None,
    kwargs: dict[str, Any] | None = None,
) -> OperationDescriptor:
    """Generic call: caller-supplied args/kwargs, empty when omitted.

    A bare string is one positional argument, not a sequence of characters.
    """
    if isinstance(args, str):
        args = [args]
    return OperationDescriptor(
        model=model,
        operation=operation,
        args=list(args) if args else [],
        kwargs=dict(kwargs) if kwargs else {},
    )


# ─── Access ──────────────────────────────────────────────────────

def shape_check_access_rights(
    model: str,
    permission: Permission | str | Sequence[Permission | str] = Permission.READ,
    with_exceptions: bool = False,
) -> OperationDescriptor:
    if isinstance(permission, (str, Permission)):
        args = [_permission_value(permission)]
    else:
        args = [_permission_value(p) for p in permission]
    return OperationDescriptor(
        model=model,
        operation="check_access_rights",
        args=args,
        kwargs={"raise_exception": with_exceptions},
    )


# ─── Search family ───────────────────────────────────────────────

def shape_search(
    model: str,
    criteria: list | None = None,
    offset: int = 0,
    limit: int = 0,
    order: str = "",
    lang: str | None = None,
) -> OperationDescriptor:
    kwargs = {"offset": offset, "limit": limit, "order": order}
    return OperationDescriptor(
        model=model,
        operation="search",
        args=[criteria if criteria is not None else []],
        kwargs=_with_lang(kwargs, lang),
    )


def shape_search_count(
    model: str, criteria: list | None = None,
) -> OperationDescriptor:
    return OperationDescriptor(
        model=model,
        operation="search_count",
        args=[criteria if criteria is not None else []],
    )


def shape_search_read(
    model: str,
    criteria: list,
    fields: list[str] | None = None,
    limit: int = 0,
    order: str = "",
    lang: str | None = None,
) -> OperationDescriptor:
    kwargs = {
        "fields": fields if fields is not None else [],
        "limit": limit,
        "order": order,
    }
    return OperationDescriptor(
        model=model,
        operation="search_read",
        args=[criteria],
        kwargs=_with_lang(kwargs, lang),
    )


# ─── Read / metadata ─────────────────────────────────────────────

def shape_read(
    model: str, ids: list[int], fields: list[str] | None = None,
) -> OperationDescriptor:
    return OperationDescriptor(
        model=model,
        operation="read",
        args=[ids],
        kwargs={"fields": fields if fields is not None else []},
    )


def shape_fields_get(
    model: str,
    fields: list[str] | None = None,
    attributes: list[str] | None = None,
) -> OperationDescriptor:
    """fields_get takes `fields` as the positional list itself (unnested)."""
    return OperationDescriptor(
        model=model,
        operation="fields_get",
        args=list(fields) if fields is not None else [],
        kwargs={"attributes": attributes if attributes is not None else []},
    )


# ─── Mutations ───────────────────────────────────────────────────

def shape_create(model: str, data: dict[str, Any]) -> OperationDescriptor:
    return OperationDescriptor(model=model, operation="create", args=[data])


def shape_write(
    model: str, ids: list[int], fields: dict[str, Any],
) -> OperationDescriptor:
    return OperationDescriptor(model=model, operation="write", args=[ids, fields])


def shape_unlink(model: str, ids: list[int]) -> OperationDescriptor:
    return OperationDescriptor(model=model, operation="unlink", args=[ids])


# ─── Fixed-target helpers ────────────────────────────────────────

def shape_translate_field(
    model: str, template_id: int, field: str,
) -> OperationDescriptor:
    """Caller's model travels as an argument; the target is ir.translation."""
    return OperationDescriptor(
        model=TRANSLATION_MODEL,
        operation=TRANSLATE_FIELDS_OPERATION,
        args=[model, template_id, field],
    )


def shape_action_archive(template_id: int, company_id: int) -> OperationDescriptor:
    return OperationDescriptor(
        model=PRODUCT_TEMPLATE_MODEL,
        operation=ACTION_ARCHIVE_OPERATION,
        args=[[template_id]],
        kwargs={"context": {"allowed_company_ids": [company_id]}},
    )
