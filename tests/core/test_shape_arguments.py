"""Argument Shaping tests — pure tests for per-operation descriptor rules.

Tests cover:
    - check_access_rights wraps scalar permissions, keeps sequences flat
    - search / search_read add context.lang only when a locale is given
    - fields_get sends fields unnested; every other method nests [x]
    - write keeps [ids, fields] order
    - translate_field / action_archive target fixed models
    - execute_kw defaults to empty args and kwargs, wraps a bare string arg
"""

from modelrpc.core.domain_types import (
    PRODUCT_TEMPLATE_MODEL,
    TRANSLATION_MODEL,
    Permission,
)
from modelrpc.core.shape_arguments import (
    shape_action_archive,
    shape_check_access_rights,
    shape_create,
    shape_execute_kw,
    shape_fields_get,
    shape_read,
    shape_search,
    shape_search_count,
    shape_search_read,
    shape_translate_field,
    shape_unlink,
    shape_write,
)


COMPANY_DOMAIN = [["is_company", "=", True]]


# ─── execute_kw ──────────────────────────────────────────────────

def test_execute_kw_defaults_to_empty_containers():
    d = shape_execute_kw("res.partner", "name_get")
    assert d.args == []
    assert d.kwargs == {}


def test_execute_kw_wraps_bare_string_arg():
    d = shape_execute_kw("res.partner", "name_search", "Acme")
    assert d.args == ["Acme"]


def test_execute_kw_passes_caller_args_through():
    d = shape_execute_kw("res.partner", "name_search", ("Acme",), {"limit": 5})
    assert d.model == "res.partner"
    assert d.operation == "name_search"
    assert d.args == ["Acme"]
    assert d.kwargs == {"limit": 5}


# ─── check_access_rights ─────────────────────────────────────────

def test_check_access_rights_wraps_bare_string():
    d = shape_check_access_rights("res.partner", "write")
    assert d.args == ["write"]
    assert d.kwargs == {"raise_exception": False}


def test_check_access_rights_defaults_to_read():
    d = shape_check_access_rights("res.partner")
    assert d.args == ["read"]
    assert type(d.args[0]) is str


def test_check_access_rights_unwraps_enum_to_plain_string():
    d = shape_check_access_rights("res.partner", Permission.UNLINK, True)
    assert d.args == ["unlink"]
    assert type(d.args[0]) is str
    assert d.kwargs == {"raise_exception": True}


def test_check_access_rights_keeps_sequence_as_is():
    d = shape_check_access_rights("res.partner", ["create"])
    assert d.args == ["create"]
    assert isinstance(d.args, list)


# ─── search family ───────────────────────────────────────────────

def test_search_without_locale_has_no_context_key():
    d = shape_search("res.partner", COMPANY_DOMAIN, 0, 10, "name asc")
    assert d.operation == "search"
    assert d.args == [COMPANY_DOMAIN]
    assert d.kwargs == {"offset": 0, "limit": 10, "order": "name asc"}
    assert "context" not in d.kwargs


def test_search_with_locale_adds_lang_context():
    d = shape_search("res.partner", COMPANY_DOMAIN, lang="fr_FR")
    assert d.kwargs["context"] == {"lang": "fr_FR"}


def test_search_empty_locale_counts_as_unset():
    d = shape_search("res.partner", COMPANY_DOMAIN, lang="")
    assert "context" not in d.kwargs


def test_search_defaults_to_empty_domain():
    d = shape_search("res.partner")
    assert d.args == [[]]
    assert d.kwargs == {"offset": 0, "limit": 0, "order": ""}


def test_search_count_sends_no_kwargs():
    d = shape_search_count("res.partner", COMPANY_DOMAIN)
    assert d.args == [COMPANY_DOMAIN]
    assert d.kwargs is None


def test_search_read_without_locale():
    d = shape_search_read("res.partner", COMPANY_DOMAIN, ["name"], 5, "id desc")
    assert d.args == [COMPANY_DOMAIN]
    assert d.kwargs == {"fields": ["name"], "limit": 5, "order": "id desc"}


def test_search_read_with_locale():
    d = shape_search_read("res.partner", COMPANY_DOMAIN, lang="es_ES")
    assert d.kwargs == {
        "fields": [], "limit": 0, "order": "",
        "context": {"lang": "es_ES"},
    }


# ─── read / fields_get ───────────────────────────────────────────

def test_read_nests_ids():
    d = shape_read("res.partner", [1, 2], ["name", "email"])
    assert d.args == [[1, 2]]
    assert d.kwargs == {"fields": ["name", "email"]}


def test_read_defaults_to_all_fields():
    assert shape_read("res.partner", [7]).kwargs == {"fields": []}


def test_fields_get_sends_fields_unnested():
    fields = ["name", "email"]
    d = shape_fields_get("res.partner", fields, ["string", "type"])
    assert d.args == fields
    assert d.args != [fields]
    assert d.kwargs == {"attributes": ["string", "type"]}


def test_fields_get_defaults():
    d = shape_fields_get("res.partner")
    assert d.args == []
    assert d.kwargs == {"attributes": []}


# ─── mutations ───────────────────────────────────────────────────

def test_create_nests_data():
    d = shape_create("res.partner", {"name": "Acme"})
    assert d.args == [{"name": "Acme"}]
    assert d.kwargs is None


def test_write_keeps_ids_then_fields():
    d = shape_write("res.partner", [3, 4], {"active": False})
    assert d.args == [[3, 4], {"active": False}]
    assert d.kwargs is None


def test_unlink_nests_ids():
    d = shape_unlink("res.partner", [9])
    assert d.operation == "unlink"
    assert d.args == [[9]]


# ─── fixed targets ───────────────────────────────────────────────

def test_translate_field_targets_translation_model():
    d = shape_translate_field("product.template", 42, "name")
    assert d.model == TRANSLATION_MODEL
    assert d.operation == "translate_fields"
    assert d.args == ["product.template", 42, "name"]
    assert d.kwargs is None


def test_action_archive_scopes_company():
    d = shape_action_archive(42, 1)
    assert d.model == PRODUCT_TEMPLATE_MODEL
    assert d.operation == "action_archive"
    assert d.args == [[42]]
    assert d.kwargs == {"context": {"allowed_company_ids": [1]}}
