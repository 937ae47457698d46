"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Validates the shape of each API response at the edge.
- Maps the service's camelCase names to snake_case attributes via aliases.

Note:
- All models are frozen; a new instance is built for every response.
- Unknown fields sent by the service are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

_RECORD_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class BaseUser(BaseModel):
    """Fields shared by users and bots."""

    model_config = _RECORD_CONFIG

    id: str = Field(..., description="Discord snowflake id.")
    username: str = Field(..., description="Discord username.")
    discriminator: str | None = Field(default=None, description="Legacy 4-digit tag.")
    avatar: str | None = Field(default=None, description="Avatar hash, if set.")
    def_avatar: str | None = Field(
        default=None,
        alias="defAvatar",
        description="Default avatar hash used when `avatar` is missing.",
    )


class UserSocials(BaseModel):
    model_config = _RECORD_CONFIG

    youtube: str | None = None
    reddit: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    github: str | None = None


class User(BaseUser):
    """A top.gg user profile.

    Vote listings only carry the `BaseUser` fields; the rest default.
    """

    bio: str | None = None
    banner: str | None = None
    social: UserSocials = Field(default_factory=UserSocials)
    color: str | None = None
    supporter: bool = False
    certified_dev: bool = Field(default=False, alias="certifiedDev")
    mod: bool = False
    web_mod: bool = Field(default=False, alias="webMod")
    admin: bool = False


class BotInfo(BaseUser):
    """A bot listing as returned by `/bots/{id}`."""

    lib: str | None = Field(default=None, description="Library the bot is written with.")
    prefix: str | None = None
    shortdesc: str | None = Field(default=None, description="Short description shown on cards.")
    longdesc: str | None = None
    tags: list[str] = Field(default_factory=list)
    website: str | None = None
    github: str | None = None
    owners: list[str] = Field(default_factory=list, description="User ids; the first is the main owner.")
    guilds: list[str] = Field(default_factory=list, description="Featured guild ids.")
    invite: str | None = None
    date: str | None = Field(default=None, description="Approval date (ISO 8601).")
    certified_bot: bool = Field(default=False, alias="certifiedBot")
    vanity: str | None = None
    points: int = Field(default=0, description="All-time upvotes.")
    monthly_points: int = Field(default=0, alias="monthlyPoints")
    donatebotguildid: str | None = None


class BotStats(BaseModel):
    """Server and shard counts of a bot.

    `shards` holds per-shard guild counts and is always a list, even when
    the payload omits it.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    server_count: int | None = None
    shard_count: int | None = None
    shards: list[int] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> BotStats:
        if not isinstance(data, dict):
            data = {}
        return cls(
            server_count=data.get("server_count"),
            shard_count=data.get("shard_count"),
            shards=data.get("shards") or [],
        )


class QueryOptions(BaseModel):
    """Search parameters for `/bots`. Unset fields are not sent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: int | None = Field(default=None, ge=1, le=500, description="Bots to return (max 500).")
    offset: int | None = Field(default=None, ge=0, description="Bots to skip.")
    search: str | None = Field(default=None, description="`field: value field2: value2` search string.")
    sort: str | None = Field(default=None, description="Field to sort by; prefix with - to reverse.")
    fields: str | None = Field(default=None, description="Comma separated list of fields to show.")

    def to_query(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class StatsPostPayload(BaseModel):
    """Body of `POST /bots/stats`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    server_count: int = Field(..., ge=0)
    shard_id: int = Field(default=0, ge=0)
    shard_count: int = Field(default=1, ge=1)
