"""Shared fixtures for the relay tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from chatrelay.api import create_app
from chatrelay.config import RelaySettings

API_KEY = "sk-test-secret-0123456789"
UPSTREAM_URL = "https://upstream.test/v1/chat/completions"

UpstreamHandler = Callable[[httpx.Request], httpx.Response]


class RecordingUpstream:
    """Stub completion endpoint that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: UpstreamHandler = lambda request: httpx.Response(
            200, json={"choices": [{"message": {"content": "hello"}}]}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def settings() -> RelaySettings:
    return RelaySettings(OPENAI_API_KEY=API_KEY, UPSTREAM_URL=UPSTREAM_URL, _env_file=None)


@pytest.fixture
def upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture
def make_client(upstream: RecordingUpstream) -> Iterator[Callable[[RelaySettings], TestClient]]:
    """Build a TestClient whose outbound calls hit the recording stub."""
    clients: list[tuple[TestClient, httpx.AsyncClient]] = []

    def _make(relay_settings: RelaySettings) -> TestClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        client = TestClient(create_app(relay_settings, http_client=http_client))
        client.__enter__()
        clients.append((client, http_client))
        return client

    yield _make

    for client, http_client in clients:
        client.__exit__(None, None, None)
        asyncio.run(http_client.aclose())


@pytest.fixture
def client(make_client: Callable[[RelaySettings], TestClient], settings: RelaySettings) -> TestClient:
    return make_client(settings)
