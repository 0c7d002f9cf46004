"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.fakes.fake_messaging_client import FakeMessagingClient


def test_health_connected(http_client: TestClient) -> None:
    response = http_client.get("/health")

    assert response.status_code == 200
    assert response.text == "Connected"
    assert response.headers["content-type"].startswith("text/plain")


def test_health_reflects_live_socket_state(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    fake_client.connected = False

    response = http_client.get("/health")

    assert response.status_code == 503
    assert response.text == "Not connected"


def test_ready_returns_json_state(http_client: TestClient) -> None:
    response = http_client.get("/ready")
    payload = response.json()

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["connection_state"] == "CONNECTED"
    assert payload["connected"] is True
    assert payload["timestamp"]


def test_ready_not_ready_when_socket_dropped(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    fake_client.connected = False

    response = http_client.get("/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
