"""XML-RPC Services — model service and service locator backed by xmlrpc.client.

Invariants:
    - XmlRpcModelService.execute_kw never raises for a remote outcome: faults,
      bad statuses and connection failures all come back as a RawResult
    - kwargs=None sends no keyword mapping at all (the remote call gets 6 params)
    - Endpoint -> service mapping is explicit in ENDPOINT_SERVICES
    - One httpx.Client per locator, shared by every resolved service; the
      locator closes it only if it created it
    - A 200 reply that is not XML-RPC comes back as a 502 RawResult

Design Decisions:
    - Outcome captured, not interpreted: the response normalizer owns the
      fault/status → error mapping
    - Resolved services kept per endpoint id so the proxy is built once
"""

import logging
import time
import xmlrpc.client
from xml.parsers.expat import ExpatError
from typing import Any

import httpx

from modelrpc.core.domain_types import MODEL_ENDPOINT, RawResult
from modelrpc.core.errors import UnknownEndpointError
from modelrpc.infrastructure.httpx_transport import HttpxTransport, build_http_client

logger = logging.getLogger(__name__)

# Reported for connection-level failures that never produced an HTTP status
UNAVAILABLE_STATUS = 503
# Reported when a 200 reply is not an XML-RPC document (proxy login, maintenance page)
BAD_GATEWAY_STATUS = 502


class XmlRpcModelService:
    """The "object" endpoint: execute_kw(db, uid, password, model, operation, args[, kwargs])."""

    def __init__(self, endpoint_url: str, transport: xmlrpc.client.Transport | None = None):
        self.endpoint_url = endpoint_url
        self._proxy = xmlrpc.client.ServerProxy(
            endpoint_url, transport=transport, allow_none=True,
        )

    def execute_kw(
        self,
        db: str,
        uid: int,
        password: str,
        model: str,
        operation: str,
        args: list,
        kwargs: dict[str, Any] | None = None,
    ) -> RawResult:
        params = [db, uid, password, model, operation, args]
        if kwargs is not None:
            params.append(kwargs)
        log_extra = {"model": model, "operation": operation, "endpoint": MODEL_ENDPOINT}
        started = time.monotonic()
        try:
            payload = self._proxy.execute_kw(*params)
        except xmlrpc.client.Fault as e:
            logger.warning(
                f"Remote fault on {model}.{operation}: {e.faultString}",
                extra={**log_extra, "fault_code": e.faultCode},
            )
            return RawResult(fault_code=e.faultCode, fault_string=e.faultString)
        except xmlrpc.client.ProtocolError as e:
            logger.warning(
                f"Bad status on {model}.{operation}: {e.errcode} {e.errmsg}",
                extra={**log_extra, "status_code": e.errcode},
            )
            return RawResult(
                status_code=e.errcode,
                reason=e.errmsg,
                headers=dict(e.headers or {}),
            )
        except (httpx.TransportError, OSError) as e:
            logger.warning(
                f"Connection failure on {model}.{operation}: {e}",
                extra={**log_extra, "status_code": UNAVAILABLE_STATUS},
            )
            return RawResult(status_code=UNAVAILABLE_STATUS, reason=str(e))
        except (xmlrpc.client.ResponseError, ExpatError) as e:
            logger.warning(
                f"Unreadable reply on {model}.{operation}: {e!r}",
                extra={**log_extra, "status_code": BAD_GATEWAY_STATUS},
            )
            return RawResult(
                status_code=BAD_GATEWAY_STATUS,
                reason=f"Invalid XML-RPC response: {e!r}",
            )
        logger.debug(
            f"{model}.{operation} ok",
            extra={
                **log_extra,
                "duration_ms": int((time.monotonic() - started) * 1000),
            },
        )
        return RawResult(payload=payload)

    def close(self) -> None:
        self._proxy("close")()


class XmlRpcServiceLocator:
    """Resolves endpoint ids to services under <url>/xmlrpc/2/<endpoint>."""

    ENDPOINT_SERVICES = {
        MODEL_ENDPOINT: XmlRpcModelService,
    }

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 30.0,
        user_agent: str = "modelrpc",
        http_client: httpx.Client | None = None,
    ):
        self.url = url.rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or build_http_client(timeout_seconds, user_agent)
        self._services: dict[str, XmlRpcModelService] = {}

    def endpoint_url(self, endpoint_id: str) -> str:
        return f"{self.url}/xmlrpc/2/{endpoint_id}"

    def resolve(self, endpoint_id: str) -> XmlRpcModelService:
        if endpoint_id in self._services:
            return self._services[endpoint_id]
        service_cls = self.ENDPOINT_SERVICES.get(endpoint_id)
        if service_cls is None:
            raise UnknownEndpointError(endpoint_id)
        transport = HttpxTransport(
            client=self._http_client, use_https=self.url.startswith("https://"),
        )
        service = service_cls(self.endpoint_url(endpoint_id), transport=transport)
        self._services[endpoint_id] = service
        return service

    def close(self) -> None:
        for service in self._services.values():
            service.close()
        self._services.clear()
        if self._owns_client:
            self._http_client.close()
