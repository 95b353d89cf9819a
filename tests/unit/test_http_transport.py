from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.mcp_server.http_transport import create_app
from src.mcp_server.server import McpServer


@pytest.fixture
def client(server: McpServer) -> TestClient:
    return TestClient(create_app(server))


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_mcp_tool_call(client: TestClient) -> None:
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "add", "arguments": {"a": 5, "b": 3}}},
    )
    assert resp.status_code == 200
    assert resp.json() == {"jsonrpc": "2.0", "id": 1, "result": {"content": [{"type": "text", "text": "8.0"}]}}


def test_mcp_errors_are_http_200(client: TestClient) -> None:
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": "x", "method": "nope"})
    assert resp.status_code == 200
    assert resp.json()["error"]["code"] == -32601


def test_mcp_parse_error(client: TestClient) -> None:
    resp = client.post("/mcp", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] is None
    assert body["error"]["code"] == -32700
    assert body["error"]["message"] == "Parse error"


def test_mcp_non_object_body(client: TestClient) -> None:
    resp = client.post("/mcp", json=[1, 2])
    assert resp.json()["error"]["code"] == -32600


def test_mcp_request_without_id_still_answered(client: TestClient) -> None:
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "resources/list"})
    body = resp.json()
    assert body["id"] is None
    assert len(body["result"]["resources"]) == 5


@pytest.mark.parametrize("body", [b'{"jsonrpc":"2.0","id":NaN,"method":"tools/list"}', b'{"jsonrpc":"2.0","id":1e400,"method":"tools/list"}'])
def test_mcp_non_finite_number_is_parse_error(client: TestClient, body: bytes) -> None:
    resp = client.post("/mcp", content=body, headers={"content-type": "application/json"})
    assert resp.status_code == 200
    out = resp.json()
    assert out["id"] is None
    assert out["error"]["code"] == -32700
