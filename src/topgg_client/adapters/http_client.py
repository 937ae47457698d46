"""httpx transport.

Why a wrapper:
- Centralizes timeouts and transport-level headers for every call.
- Lets tests inject an `httpx.AsyncClient` backed by `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from topgg_client.core.config import ClientConfig
from topgg_client.core.request_builder import RequestDescriptor

USER_AGENT = "topgg-client/0.1 (+https://top.gg)"


def build_async_client(
    config: ClientConfig,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout."""

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`Transport` implementation on top of httpx.

    Without an injected client, every call opens and closes its own
    `httpx.AsyncClient`. An injected client is used as-is and never closed
    here; its lifecycle belongs to the caller.
    """

    def __init__(self, config: ClientConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        if self._client is not None:
            return await self._send(self._client, request)
        async with build_async_client(self._config) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: RequestDescriptor) -> httpx.Response:
        return await client.request(
            request.method.value,
            request.url,
            headers=request.headers,
            json=request.body,
        )
