"""Shared fixtures: a scripted Joplin backend behind httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest

from joplin_mcp.config import Settings
from joplin_mcp.engine import ToolExecutor
from joplin_mcp.services import JoplinClient

TOKEN = "secret-token"


class FakeJoplin:
    """Records every request and answers from a (method, path) route table."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], tuple[int, str]] = {}

    def respond(self, method: str, path: str, body: str = "", status: int = 200) -> None:
        self._routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self._routes.get((request.method, request.url.path), (200, "{}"))
        return httpx.Response(status, text=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the backend"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def fake_joplin() -> FakeJoplin:
    return FakeJoplin()


@pytest.fixture
def settings() -> Settings:
    return Settings(backend_token=TOKEN, liveness_delay_seconds=0)


@pytest.fixture
async def joplin_client(fake_joplin: FakeJoplin) -> AsyncIterator[JoplinClient]:
    client = JoplinClient("http://localhost:41184", token=TOKEN, transport=fake_joplin.transport)
    yield client
    await client.aclose()


@pytest.fixture
def executor(joplin_client: JoplinClient) -> ToolExecutor:
    return ToolExecutor(joplin_client)
