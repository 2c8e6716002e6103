"""Session State — credentials and locale read by every dispatched call.

Invariants:
    - Credentials are fixed for the session's lifetime
    - current_lang is None until set explicitly; "" is treated as unset
    - Nothing in a dispatched call writes to the session

Design Decisions:
    - Injected into ModelDispatch at construction instead of mixed into a host class
    - uid() is a method so a session backed by a later login can compute it lazily
"""

from modelrpc.core.domain_types import Credentials


class Session:
    """Per-connection state: credentials triple plus optional locale."""

    def __init__(self, credentials: Credentials, current_lang: str | None = None):
        self._credentials = credentials
        self._current_lang = current_lang or None

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def db(self) -> str:
        return self._credentials.db

    def uid(self) -> int:
        return self._credentials.uid

    @property
    def password(self) -> str:
        return self._credentials.password

    @property
    def current_lang(self) -> str | None:
        return self._current_lang

    def set_lang(self, lang: str | None) -> None:
        """Set (or clear, with None/"") the locale sent with search-family calls."""
        self._current_lang = lang or None

