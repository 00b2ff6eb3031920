"""Tests for the HTTP surface using FastAPI's TestClient."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from joplin_mcp.config import Settings
from joplin_mcp.mcp import PARSE_ERROR
from joplin_mcp.server import _filter_sentry_breadcrumb, _filter_sentry_event, create_app
from tests.conftest import TOKEN, FakeJoplin


@pytest.fixture
def http(fake_joplin: FakeJoplin, settings: Settings) -> TestClient:
    return TestClient(create_app(settings, transport=fake_joplin.transport))


class TestTransport:
    def test_round_trip(self, fake_joplin: FakeJoplin, http: TestClient) -> None:
        folders = '{"items": [{"id": "f1", "title": "Inbox"}], "has_more": false}'
        fake_joplin.respond("GET", "/folders", folders)
        envelope = {
            "jsonrpc": "2.0",
            "id": 42,
            "method": "tools/call",
            "params": {"name": "list_folders", "arguments": {}},
        }

        response = http.post(
            "/", content=json.dumps(envelope), headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        body = json.loads(response.text)
        assert body["id"] == 42
        assert body["result"]["content"][0] == {"type": "text", "text": folders}
        assert fake_joplin.last.url.params["token"] == TOKEN

    def test_rpc_errors_are_http_200(self, http: TestClient) -> None:
        response = http.post("/", json={"jsonrpc": "2.0", "id": 1, "method": "nope"})
        assert response.status_code == 200
        assert response.json()["error"]["code"] == -32601

    def test_backend_404_is_rpc_error(self, fake_joplin: FakeJoplin, http: TestClient) -> None:
        fake_joplin.respond("GET", "/notes/x", "not found", status=404)
        response = http.post(
            "/",
            json={
                "jsonrpc": "2.0",
                "id": 7,
                "method": "tools/call",
                "params": {"name": "get_note", "arguments": {"note_id": "x"}},
            },
        )
        assert response.status_code == 200
        error = response.json()["error"]
        assert error["code"] == -32603
        assert "404" in error["message"] and "not found" in error["message"]

    def test_malformed_json(self, http: TestClient) -> None:
        response = http.post("/", content=b"{broken", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == PARSE_ERROR

    def test_empty_body(self, http: TestClient) -> None:
        assert http.post("/", content=b"").status_code == 400

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_non_post_rejected(self, http: TestClient, method: str) -> None:
        assert http.request(method, "/").status_code == 405

    def test_non_post_body(self, http: TestClient) -> None:
        response = http.get("/")
        assert response.status_code == 405
        assert response.json() == {"success": False, "error": "Method Not Allowed"}
        assert "POST" in response.headers["allow"]

    def test_unknown_path_body(self, http: TestClient) -> None:
        response = http.post("/nowhere", json={})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    def test_batch(self, http: TestClient) -> None:
        response = http.post(
            "/",
            json=[
                {"jsonrpc": "2.0", "id": 1, "method": "ping"},
                {"jsonrpc": "2.0", "id": 2, "method": "initialize"},
            ],
        )
        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [1, 2]

    def test_request_id_header(self, http: TestClient) -> None:
        response = http.post("/", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert response.headers["x-request-id"]


class TestHealth:
    def test_before_probe(self, http: TestClient) -> None:
        response = http.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["backend"]["reachable"] is None

    def test_reports_probe_result(self, http: TestClient) -> None:
        http.app.state.backend_status.record(False, "connection refused")
        backend = http.get("/health").json()["backend"]
        assert backend["reachable"] is False
        assert backend["detail"] == "connection refused"
        assert backend["checked_at"] is not None


class TestLifespan:
    def test_startup_and_shutdown(self, fake_joplin: FakeJoplin, settings: Settings) -> None:
        fake_joplin.respond("GET", "/ping", "JoplinClipperServer")
        with TestClient(create_app(settings, transport=fake_joplin.transport)) as http:
            response = http.post("/", json={"jsonrpc": "2.0", "id": 1, "method": "initialize"})
            assert response.json()["result"]["serverInfo"]["name"] == "joplin-mcp-server"


class TestSentryScrubbing:
    def test_breadcrumb_url_and_query(self) -> None:
        crumb = {
            "type": "http",
            "category": "httplib",
            "data": {
                "url": f"http://localhost:41184/notes?limit=5&token={TOKEN}",
                "http.query": f"limit=5&token={TOKEN}",
                "http.method": "GET",
                "status_code": 200,
            },
        }

        data = _filter_sentry_breadcrumb(crumb)["data"]

        assert TOKEN not in data["url"]
        assert data["http.query"] == "limit=5&token=[REDACTED]"
        assert data["status_code"] == 200

    def test_event_breadcrumbs_and_spans(self) -> None:
        event = {
            "request": {"query_string": "a=1"},
            "breadcrumbs": {"values": [{"data": {"http.query": f"token={TOKEN}"}}]},
            "spans": [
                {
                    "description": f"GET http://localhost:41184/tags?token={TOKEN}",
                    "data": {"http.query": f"token={TOKEN}&page=2"},
                }
            ],
        }

        scrubbed = json.dumps(_filter_sentry_event(event))

        assert TOKEN not in scrubbed
        assert event["request"]["query_string"] == "[REDACTED]"
        assert event["spans"][0]["data"]["http.query"] == "token=[REDACTED]&page=2"

    def test_event_without_breadcrumbs(self) -> None:
        assert _filter_sentry_event({"message": "boom"}) == {"message": "boom"}
