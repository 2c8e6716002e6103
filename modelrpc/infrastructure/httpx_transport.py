"""HTTPX Transport — xmlrpc.client Transport that sends request bodies through httpx.

Invariants:
    - Encoding/decoding stays with xmlrpc.client (getparser); httpx only moves bytes
    - Non-200 replies raise xmlrpc.client.ProtocolError, like the stdlib transports
    - A transport closes its httpx.Client only if it created it

Design Decisions:
    - httpx over http.client: shared connection pool, explicit timeouts, mockable
      with httpx.MockTransport in tests
"""

import xmlrpc.client

import httpx


def build_http_client(
    timeout_seconds: float = 30.0,
    user_agent: str = "modelrpc",
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an httpx.Client with the headers every XML-RPC request needs."""
    return httpx.Client(
        timeout=httpx.Timeout(timeout_seconds),
        headers={"User-Agent": user_agent, "Content-Type": "text/xml"},
        transport=transport,
    )


class HttpxTransport(xmlrpc.client.Transport):
    """POSTs marshalled XML-RPC calls with httpx and unmarshals the reply."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        use_https: bool = False,
        timeout_seconds: float = 30.0,
        user_agent: str = "modelrpc",
    ):
        super().__init__()
        self._owns_client = client is None
        self._client = client or build_http_client(timeout_seconds, user_agent)
        self._scheme = "https" if use_https else "http"

    def request(self, host, handler, request_body, verbose=False):
        url = f"{self._scheme}://{host}{handler}"
        response = self._client.post(url, content=request_body)
        if response.status_code != 200:
            raise xmlrpc.client.ProtocolError(
                url,
                response.status_code,
                response.reason_phrase,
                dict(response.headers),
            )
        parser, unmarshaller = self.getparser()
        parser.feed(response.content)
        parser.close()
        return unmarshaller.close()

    def close(self):
        if self._owns_client:
            self._client.close()
