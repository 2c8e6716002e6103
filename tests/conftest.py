"""Root conftest — shared test configuration."""

import os

import pytest

from modelrpc.config import get_settings

# Ensure tests never pick up a developer's real server or credentials
os.environ.setdefault("MODELRPC_URL", "http://odoo.test:8069")
os.environ.setdefault("MODELRPC_DB", "test_db")
os.environ.setdefault("MODELRPC_UID", "2")
os.environ.setdefault("MODELRPC_PASSWORD", "test-api-key")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
