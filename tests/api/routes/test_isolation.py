"""Testes do isolamento de falhas por requisição (IsolatedRoute)."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from tests.fakes.app_factory import GROUP, start_connected_session
from tests.fakes.fake_messaging_client import FakeMessagingClient


def test_unexpected_exception_becomes_500_and_service_keeps_serving(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    fake_client.failures["get_group_info"] = RuntimeError("nil pointer")

    faulty = http_client.get("/group/members")
    health = http_client.get("/health")
    add = http_client.get("/group/add?phone=123")

    assert faulty.status_code == 500
    assert faulty.text == "Internal server error"
    assert health.status_code == 200
    assert add.status_code == 200


def test_correlation_id_is_propagated(http_client: TestClient) -> None:
    response = http_client.get("/health", headers={"X-Correlation-Id": "corr-42"})

    assert response.headers["x-correlation-id"] == "corr-42"


def test_correlation_id_is_generated_when_missing(http_client: TestClient) -> None:
    response = http_client.get("/health")

    assert response.headers["x-correlation-id"]


def test_fault_response_also_carries_correlation_id(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    fake_client.failures["send_message"] = KeyError("boom")

    response = http_client.get(
        "/group/send_contact?name=a&phone=1",
        headers={"X-Correlation-Id": "corr-fault"},
    )

    assert response.status_code == 500
    assert response.headers["x-correlation-id"] == "corr-fault"


class _SlowMembersClient(FakeMessagingClient):
    def __init__(self) -> None:
        super().__init__(members=["1"])
        self.release = asyncio.Event()
        self.entered = asyncio.Event()

    async def get_group_info(self, group):  # type: ignore[no-untyped-def]
        self.entered.set()
        await self.release.wait()
        return await super().get_group_info(group)


@pytest.mark.asyncio
async def test_slow_request_does_not_block_other_requests() -> None:
    client = _SlowMembersClient()
    app = create_app(await start_connected_session(client), GROUP)
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        slow = asyncio.create_task(http.get("/group/members"))
        await asyncio.wait_for(client.entered.wait(), timeout=1)

        health = await asyncio.wait_for(http.get("/health"), timeout=1)
        assert health.status_code == 200
        assert not slow.done()

        client.release.set()
        members = await asyncio.wait_for(slow, timeout=1)

    assert members.json() == ["1"]
