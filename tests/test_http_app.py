"""Unit tests for the HTTP application.

Tests use Starlette TestClient for fast, synchronous testing without
spawning real servers or opening sockets.
"""

import pytest
from starlette.testclient import TestClient

from tests.rpc_helpers import WINDOW_MS, rpc_body
from vertinfo.http import HttpAppFactory, create_app
from vertinfo.http.app import UNKNOWN_CLIENT, client_identity


@pytest.fixture
def client(pipeline) -> TestClient:
    return TestClient(create_app(pipeline))


def test_create_app_satisfies_http_app_factory() -> None:
    """Verify create_app satisfies HttpAppFactory protocol."""
    assert isinstance(create_app, HttpAppFactory)


def test_health_returns_ok(client) -> None:
    """GET /health returns 200 with status ok."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_post_burn_status(client) -> None:
    response = client.post(
        "/",
        content=b'{"jsonrpc":"2.0","id":1,"method":"get_burnStatus","params":{"hash":"0xabc"}}',
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"jsonrpc": "2.0", "result": "confirmed", "id": 1}


def test_malformed_json_is_500(client) -> None:
    response = client.post("/", content=b"{oops")
    assert response.status_code == 500
    assert response.json()["error"]["code"] == -32700
    assert response.json()["id"] is None


def test_unknown_method_is_404(client) -> None:
    response = client.post("/", content=rpc_body("get_nonexistent"))
    assert response.status_code == 404
    assert response.json()["error"]["code"] == -32601


def test_throttled_client_gets_429(client, clock) -> None:
    assert client.post("/", content=rpc_body("get_activeChains")).status_code == 200
    throttled = client.post("/", content=rpc_body("get_activeChains"))
    assert throttled.status_code == 429
    assert throttled.json()["error"]["code"] == -32005

    clock.advance(WINDOW_MS)
    assert client.post("/", content=rpc_body("get_activeChains")).status_code == 200


def test_remote_host_is_rate_limit_identity(client, limiter) -> None:
    client.post("/", content=rpc_body("get_activeChains"))
    # TestClient connects as host "testclient"
    assert limiter.admit("testclient") is False


def test_health_is_not_rate_limited(client) -> None:
    client.post("/", content=rpc_body("get_activeChains"))
    assert client.get("/health").status_code == 200


def test_get_on_rpc_path_is_405(client) -> None:
    assert client.get("/").status_code == 405


def test_custom_rpc_path(pipeline) -> None:
    client = TestClient(create_app(pipeline, rpc_path="/rpc"))
    assert client.post("/rpc", content=rpc_body("get_activeChains")).status_code == 200
    assert client.post("/", content=rpc_body("get_activeChains")).status_code == 404


def test_client_identity_without_client() -> None:
    class _Request:
        client = None

    assert client_identity(_Request()) == UNKNOWN_CLIENT  # type: ignore[arg-type]
