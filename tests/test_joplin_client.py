"""Tests for JoplinClient with a mocked httpx transport."""

from __future__ import annotations

import httpx
import pytest

from joplin_mcp.errors import BackendError, BackendStatusError, BackendTransportError
from joplin_mcp.models import HttpMethod
from joplin_mcp.services import PING_SENTINEL, BackendRequest, JoplinClient
from tests.conftest import TOKEN, FakeJoplin


class TestSend:
    async def test_returns_raw_body(self, fake_joplin: FakeJoplin, joplin_client: JoplinClient) -> None:
        fake_joplin.respond("GET", "/folders", '{"items": [], "has_more": false}')
        text = await joplin_client.send(BackendRequest(HttpMethod.GET, "/folders"))
        assert text == '{"items": [], "has_more": false}'

    async def test_appends_token(self, fake_joplin: FakeJoplin, joplin_client: JoplinClient) -> None:
        await joplin_client.send(BackendRequest(HttpMethod.GET, "/tags"))
        assert fake_joplin.last.url.params["token"] == TOKEN

    async def test_token_alongside_other_params(
        self, fake_joplin: FakeJoplin, joplin_client: JoplinClient
    ) -> None:
        await joplin_client.send(BackendRequest(HttpMethod.GET, "/notes", params={"limit": 10}))
        params = fake_joplin.last.url.params
        assert params["limit"] == "10"
        assert params["token"] == TOKEN
        assert fake_joplin.last.url.query.count(b"?") == 0

    async def test_no_token_when_unconfigured(self, fake_joplin: FakeJoplin) -> None:
        client = JoplinClient("http://localhost:41184", transport=fake_joplin.transport)
        try:
            await client.send(BackendRequest(HttpMethod.GET, "/tags"))
        finally:
            await client.aclose()
        assert "token" not in fake_joplin.last.url.params
        assert fake_joplin.last.url.query == b""

    async def test_json_body(self, fake_joplin: FakeJoplin, joplin_client: JoplinClient) -> None:
        await joplin_client.send(
            BackendRequest(HttpMethod.POST, "/notes", body={"title": "t", "body": "b"})
        )
        assert fake_joplin.last.headers["content-type"] == "application/json"
        assert fake_joplin.last_json() == {"title": "t", "body": "b"}

    async def test_empty_json_body_is_sent(
        self, fake_joplin: FakeJoplin, joplin_client: JoplinClient
    ) -> None:
        await joplin_client.send(BackendRequest(HttpMethod.PUT, "/notes/abc", body={}))
        assert fake_joplin.last_json() == {}

    async def test_no_body(self, fake_joplin: FakeJoplin, joplin_client: JoplinClient) -> None:
        await joplin_client.send(BackendRequest(HttpMethod.DELETE, "/notes/abc"))
        assert fake_joplin.last.content == b""
        assert "content-type" not in fake_joplin.last.headers


class TestErrors:
    async def test_status_error_captures_body(
        self, fake_joplin: FakeJoplin, joplin_client: JoplinClient
    ) -> None:
        fake_joplin.respond("GET", "/notes/missing", "not found", status=404)
        with pytest.raises(BackendStatusError) as excinfo:
            await joplin_client.send(BackendRequest(HttpMethod.GET, "/notes/missing"))
        assert excinfo.value.status_code == 404
        assert excinfo.value.body == "not found"
        assert "404" in str(excinfo.value)
        assert "not found" in str(excinfo.value)

    async def test_3xx_is_not_an_error(
        self, fake_joplin: FakeJoplin, joplin_client: JoplinClient
    ) -> None:
        fake_joplin.respond("GET", "/tags", "moved", status=304)
        assert await joplin_client.send(BackendRequest(HttpMethod.GET, "/tags")) == "moved"

    async def test_connection_refused(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = JoplinClient("http://localhost:41184", transport=httpx.MockTransport(refuse))
        try:
            with pytest.raises(BackendTransportError):
                await client.send(BackendRequest(HttpMethod.GET, "/notes"))
        finally:
            await client.aclose()

    async def test_timeout(self) -> None:
        def stall(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = JoplinClient("http://localhost:41184", transport=httpx.MockTransport(stall))
        try:
            with pytest.raises(BackendTransportError, match="timeout"):
                await client.send(BackendRequest(HttpMethod.GET, "/notes"))
        finally:
            await client.aclose()

    def test_timeout_is_configured(self) -> None:
        client = JoplinClient("http://localhost:41184", timeout=30.0)
        assert client._client.timeout.read == 30.0


class TestPing:
    async def test_ping_ok(self, fake_joplin: FakeJoplin, joplin_client: JoplinClient) -> None:
        fake_joplin.respond("GET", "/ping", PING_SENTINEL)
        await joplin_client.ping()
        assert fake_joplin.last.url.path == "/ping"

    async def test_ping_unexpected_body(
        self, fake_joplin: FakeJoplin, joplin_client: JoplinClient
    ) -> None:
        fake_joplin.respond("GET", "/ping", "SomethingElse")
        with pytest.raises(BackendError, match="unexpected ping response: SomethingElse"):
            await joplin_client.ping()
