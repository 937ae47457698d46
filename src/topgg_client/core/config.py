"""Client configuration.

Why here:
- Centralizes the credential and the environment variables (pydantic-settings)
  so the client and the transport read them the same way.
- Immutable once built: one config per client, shared by concurrent calls.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_URL = "https://top.gg/api"


class ClientConfig(BaseSettings):
    """Credentials and settings for a `DBLClient`.

    Keyword arguments win over `TOPGG_*` environment variables, which win
    over a local `.env` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOPGG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    token: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="API token sent in the Authorization header.",
    )
    secret: str | None = Field(
        default=None,
        repr=False,
        description="Webhook secret, if one is configured for vote payloads.",
    )
    id: str | None = Field(
        default=None,
        description="Default bot id for get_bot/get_stats.",
    )

    base_url: str = Field(
        default=BASE_URL,
        min_length=8,
        description="API root; request paths are appended verbatim.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
