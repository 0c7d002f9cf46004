"""Fixtures compartilhadas pelos testes de rotas."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.fakes.app_factory import build_connected_app
from tests.fakes.fake_messaging_client import FakeMessagingClient


@pytest.fixture
def fake_client() -> FakeMessagingClient:
    return FakeMessagingClient(members=["5511000000001", "5511000000002", "5511000000003"])


@pytest.fixture
def http_client(fake_client: FakeMessagingClient) -> TestClient:
    return TestClient(build_connected_app(fake_client))
