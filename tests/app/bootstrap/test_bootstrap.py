"""Testes do bootstrap: validação de settings e factories."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from pathlib import Path

import pytest

from app.bootstrap import validate_runtime_settings
from app.bootstrap.clients import create_session_manager
from app.infra.stores import SqliteCredentialStore
from app.protocols.models import PairingEvent
from config.settings import (
    WhatsAppSessionSettings,
    get_base_settings,
    get_http_settings,
    get_whatsapp_settings,
)
from fsm import ConnectionState
from tests.fakes.fake_messaging_client import FakeMessagingClient, RecordingQrRenderer

_GETTERS = (get_base_settings, get_http_settings, get_whatsapp_settings)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


def test_validation_only_warns_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("WHATSAPP_GROUP_JID", raising=False)

    validate_runtime_settings()


def test_validation_is_fatal_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("WHATSAPP_GROUP_JID", raising=False)

    with pytest.raises(RuntimeError, match="Configuração inválida para production"):
        validate_runtime_settings()


def test_validation_passes_in_production_with_real_group(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("WHATSAPP_GROUP_JID", "120363-555@g.us")
    monkeypatch.setenv("HTTP_PORT", "8080")

    validate_runtime_settings()


def test_create_session_manager_wires_sqlite_store_and_pairing(tmp_path: Path) -> None:
    settings = WhatsAppSessionSettings(
        store_path=str(tmp_path / "store.db"),
        pairing_timeout_seconds=5,
    )
    client = FakeMessagingClient(
        pairing_script=[PairingEvent.code_event("qr"), PairingEvent.success()]
    )
    renderer = RecordingQrRenderer()

    manager = create_session_manager(settings, client=client, renderer=renderer)
    asyncio.run(manager.start(asyncio.Event()))

    # Arquivo inexistente = nunca pareado → fluxo de pareamento
    assert manager.state == ConnectionState.CONNECTED
    assert renderer.codes == ["qr"]


def test_create_session_manager_defaults_to_sqlite_store(tmp_path: Path) -> None:
    settings = WhatsAppSessionSettings(store_path=str(tmp_path / "store.db"))

    manager = create_session_manager(settings, client=FakeMessagingClient())

    assert isinstance(manager._credential_store, SqliteCredentialStore)
