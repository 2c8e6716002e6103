"""Service test fixtures — recording model service and locator.

Invariants:
    - Every test gets a fresh recording service (no state shared between tests)
    - The service returns whatever RawResult the test queued, default payload True
"""

import pytest

from modelrpc.core.domain_types import Credentials, RawResult
from modelrpc.core.session_state import Session
from modelrpc.services.model_dispatch import ModelDispatch


class RecordingModelService:
    """Records each execute_kw call and replays a configured RawResult."""

    def __init__(self):
        self.calls = []
        self.result = RawResult(payload=True)

    def execute_kw(self, db, uid, password, model, operation, args, kwargs=None):
        self.calls.append({
            "db": db, "uid": uid, "password": password,
            "model": model, "operation": operation,
            "args": args, "kwargs": kwargs,
        })
        return self.result

    @property
    def last(self) -> dict:
        return self.calls[-1]


class RecordingLocator:
    def __init__(self, service):
        self.service = service
        self.resolved = []

    def resolve(self, endpoint_id):
        self.resolved.append(endpoint_id)
        return self.service


@pytest.fixture
def service():
    return RecordingModelService()


@pytest.fixture
def session():
    return Session(Credentials("test_db", 2, "test-api-key"))


@pytest.fixture
def locator(service):
    return RecordingLocator(service)


@pytest.fixture
def dispatch(session, locator):
    return ModelDispatch(session, locator)
