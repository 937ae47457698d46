"""Shared pytest fixtures for topgg_client.

- Isolates tests from TOPGG_* variables and any `.env` in the working dir.
- Provides a recording fake transport and a MockTransport-backed client.
"""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from topgg_client import ClientConfig, DBLClient
from topgg_client.adapters.http_client import HttpxTransport

from tests.fakes import RecordingTransport


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Config must only come from what each test passes explicitly."""

    for key in list(os.environ):
        if key.upper().startswith("TOPGG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(token="test-token", id="264811613708746752")


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def fake_client(config: ClientConfig, recording_transport: RecordingTransport) -> DBLClient:
    return DBLClient(config, transport=recording_transport)


@pytest.fixture
def mock_api(config: ClientConfig) -> Callable[[Callable[[httpx.Request], httpx.Response]], DBLClient]:
    """Build a `DBLClient` whose httpx calls are answered by `handler`."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> DBLClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return DBLClient(config, transport=HttpxTransport(config, client=http))

    return factory
