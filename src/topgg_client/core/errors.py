"""Exception types raised by the client."""

from __future__ import annotations

from pprint import pformat
from typing import Any

import httpx

# Network failures are raised by httpx unchanged; re-exported for callers.
TransportError = httpx.HTTPError


class DBLError(Exception):
    """Base class for errors raised by topgg_client itself."""


class PreconditionError(DBLError, ValueError):
    """Raised when a required id is neither passed nor configured."""


class ApiError(DBLError):
    """Raised when the API answers with a status outside {200, 201, 204}."""

    def __init__(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"top.gg API responded with HTTP {status_code}: {render_body(body)}")


def render_body(body: Any) -> str:
    """Readable text for a parsed (or raw) response body."""

    if isinstance(body, str):
        return body
    return pformat(body, width=100)
