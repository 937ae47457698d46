"""Transport contract.

Why Protocol:
- The client depends on a structural "fetch" capability, not on httpx.
- Tests can pass a fake that records descriptors without any network.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from topgg_client.core.request_builder import RequestDescriptor


@runtime_checkable
class TransportResponse(Protocol):
    """Subset of `httpx.Response` the client relies on."""

    @property
    def status_code(self) -> int: ...

    @property
    def text(self) -> str: ...

    def json(self) -> Any: ...


@runtime_checkable
class Transport(Protocol):
    """Performs one HTTP call.

    Errors (connection, timeout) propagate to the caller unchanged.
    """

    async def send(self, request: RequestDescriptor) -> TransportResponse:
        ...
