"""Client Assembly — wires settings, logging, locator and session into a ModelDispatch.

Invariants:
    - Credentials are validated here, before any remote call is possible
    - Logging is configured only when explicitly requested

Design Decisions:
    - Composition in one function instead of a host class mixing in the facade
"""

import logging

from modelrpc.config import Settings, get_settings
from modelrpc.core.boundary_protocols import ServiceLocator
from modelrpc.core.domain_types import Credentials
from modelrpc.core.session_state import Session
from modelrpc.infrastructure.observability import setup_logging
from modelrpc.infrastructure.xmlrpc_service import XmlRpcServiceLocator
from modelrpc.services.model_dispatch import ModelDispatch

logger = logging.getLogger(__name__)


def build_model_dispatch(
    settings: Settings | None = None,
    *,
    locator: ServiceLocator | None = None,
    configure_logging: bool = False,
) -> ModelDispatch:
    """Build a ready-to-use ModelDispatch from settings (env by default)."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)

    credentials = Credentials(settings.db, settings.uid, settings.password)
    session = Session(credentials, current_lang=settings.lang)
    locator = locator or XmlRpcServiceLocator(
        settings.url,
        timeout_seconds=settings.timeout_seconds,
        user_agent=settings.user_agent,
    )
    logger.info(
        f"Model dispatch ready for {settings.url} (db={settings.db}, uid={settings.uid})",
    )
    return ModelDispatch(session, locator)
