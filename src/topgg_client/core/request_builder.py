"""Request construction.

Pure functions: turn (verb, url, payload) into a `RequestDescriptor` and
encode read payloads as query strings. No I/O happens here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Characters encodeURIComponent leaves untouched, besides alphanumerics.
_UNRESERVED = "-_.!~*'()"


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    HEAD = "HEAD"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: str | HTTPMethod) -> HTTPMethod:
        """Accept any case; reject verbs the API client does not support."""

        if isinstance(value, HTTPMethod):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {value!r}") from None


class RequestDescriptor(BaseModel):
    """Everything the transport needs to perform one call."""

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    url: str = Field(..., min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] | None = None


def prepare(
    method: str | HTTPMethod,
    url: str,
    *,
    token: str,
    payload: Mapping[str, Any] | None = None,
) -> RequestDescriptor:
    """Build the descriptor for one call.

    GET payloads never become a body; the caller puts them in the query
    string (see `encode_query`). Other verbs carry the payload as-is.
    """

    verb = HTTPMethod.parse(method)
    body = None
    if verb is not HTTPMethod.GET and payload is not None:
        body = dict(payload)
    return RequestDescriptor(
        method=verb,
        url=url,
        headers={"Authorization": token},
        body=body,
    )


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(payload: Mapping[str, Any]) -> str:
    """Percent-encode `payload` as `k=v&k2=v2`, keeping insertion order.

    `None` values are skipped.
    """

    pairs = []
    for key, value in payload.items():
        if value is None:
            continue
        k = quote(str(key), safe=_UNRESERVED)
        v = quote(_format_value(value), safe=_UNRESERVED)
        pairs.append(f"{k}={v}")
    return "&".join(pairs)


def with_query(url: str, payload: Mapping[str, Any] | None) -> str:
    if payload is None:
        return url
    return f"{url}?{encode_query(payload)}"
