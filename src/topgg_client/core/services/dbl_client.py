"""top.gg API client.

Responsibility:
- Hold the `ClientConfig` and the transport.
- Turn each typed operation into one call through `request()`.
- Classify the HTTP status and build typed results from the JSON.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

from topgg_client.adapters.http_client import HttpxTransport
from topgg_client.core.config import ClientConfig
from topgg_client.core.domain.models import (
    BotInfo,
    BotStats,
    QueryOptions,
    StatsPostPayload,
    User,
)
from topgg_client.core.errors import ApiError, PreconditionError
from topgg_client.core.interfaces.transport import Transport, TransportResponse
from topgg_client.core.request_builder import HTTPMethod, prepare, with_query

logger = logging.getLogger("topgg_client.client")

SUCCESS_STATUSES = frozenset({200, 201, 204})


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def _error_body(response: TransportResponse) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class DBLClient:
    """Async client for the top.gg API.

    Without a config, one is loaded from `TOPGG_*` environment variables.
    Without a transport, calls go through `HttpxTransport`.
    """

    def __init__(self, config: ClientConfig | None = None, *, transport: Transport | None = None) -> None:
        self._config = config or ClientConfig()
        self._transport = transport or HttpxTransport(self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def id(self) -> str | None:
        return self._config.id

    @property
    def secret(self) -> str | None:
        return self._config.secret

    async def request(
        self,
        method: str | HTTPMethod,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call `base_url + path` and return the parsed JSON body.

        GET payloads go in the query string, other payloads in the body.
        Returns None for 204. Raises `ApiError` for any status outside
        {200, 201, 204}; transport and JSON errors propagate unchanged.
        """

        verb = HTTPMethod.parse(method)
        url = self._config.base_url + path
        if verb is HTTPMethod.GET:
            url = with_query(url, payload)

        descriptor = prepare(verb, url, token=self._config.token, payload=payload)
        response = await self._transport.send(descriptor)

        status = response.status_code
        logger.debug("%s %s -> %s", verb.value, url, status)
        if status == 204:
            return None
        if status not in SUCCESS_STATUSES:
            error = ApiError(status, _error_body(response))
            logger.warning("%s %s failed: %s", verb.value, path, error)
            raise error
        return response.json()

    def _resolve_bot_id(self, bot_id: str | None, operation: str) -> str:
        resolved = bot_id if bot_id is not None else self._config.id
        if resolved is None:
            raise PreconditionError(f"{operation} requires a bot id (argument or configured `id`)")
        return resolved

    async def get_bot(self, bot_id: str | None = None) -> BotInfo:
        """Get a bot's listing. Defaults to the configured id."""

        bot_id = self._resolve_bot_id(bot_id, "get_bot")
        data = await self.request(HTTPMethod.GET, f"/bots/{_segment(bot_id)}")
        return BotInfo.model_validate(data)

    async def get_stats(self, bot_id: str | None = None) -> BotStats:
        """Get a bot's server/shard stats. Defaults to the configured id."""

        bot_id = self._resolve_bot_id(bot_id, "get_stats")
        data = await self.request(HTTPMethod.GET, f"/bots/{_segment(bot_id)}/stats")
        return BotStats.from_payload(data)

    async def get_user(self, user_id: str) -> User:
        data = await self.request(HTTPMethod.GET, f"/users/{_segment(user_id)}")
        return User.model_validate(data)

    async def get_bots(self, query: QueryOptions | Mapping[str, Any] | None = None) -> Any:
        """Search bots. The response is returned as parsed JSON."""

        if isinstance(query, QueryOptions):
            query = query.to_query()
        return await self.request(HTTPMethod.GET, "/bots", query)

    async def get_votes(self) -> list[User]:
        """Last 1000 voters of the bot owning the token.

        Bots with more monthly votes should use webhooks instead.
        """

        data = await self.request(HTTPMethod.GET, "/bots/votes")
        return [User.model_validate(item) for item in data or []]

    async def has_voted(self, user_id: str) -> bool:
        data = await self.request(HTTPMethod.GET, "/bots/check", {"userId": user_id})
        if not isinstance(data, dict):
            return False
        voted = data.get("voted")
        # Only the number 1 counts; True and "1" do not.
        return isinstance(voted, (int, float)) and not isinstance(voted, bool) and voted == 1

    async def is_weekend(self) -> bool | None:
        """Whether the weekend vote multiplier is active."""

        data = await self.request(HTTPMethod.GET, "/weekend")
        if not isinstance(data, dict):
            return None
        return data.get("is_weekend")

    async def post_stats(self, server_count: int, shard_id: int = 0, shard_count: int = 1) -> None:
        """Post the bot's server count, optionally for one shard."""

        body = StatsPostPayload(server_count=server_count, shard_id=shard_id, shard_count=shard_count)
        await self.request(HTTPMethod.POST, "/bots/stats", body.model_dump())
