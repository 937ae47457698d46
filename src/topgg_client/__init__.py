"""Async typed client for the top.gg bot-listing API."""

from topgg_client.core.config import BASE_URL, ClientConfig
from topgg_client.core.domain.models import (
    BaseUser,
    BotInfo,
    BotStats,
    QueryOptions,
    StatsPostPayload,
    User,
    UserSocials,
)
from topgg_client.core.errors import ApiError, DBLError, PreconditionError, TransportError
from topgg_client.core.logging_config import setup_logging
from topgg_client.core.services.dbl_client import DBLClient

__all__ = [
    "BASE_URL",
    "ApiError",
    "BaseUser",
    "BotInfo",
    "BotStats",
    "ClientConfig",
    "DBLClient",
    "DBLError",
    "PreconditionError",
    "QueryOptions",
    "StatsPostPayload",
    "TransportError",
    "User",
    "UserSocials",
    "setup_logging",
]
