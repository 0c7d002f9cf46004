"""Testes end-to-end das rotas /group/* com colaborador fake."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.domain.group import ParticipantAction
from tests.fakes.fake_messaging_client import FakeMessagingClient
from utils.errors import MessagingProviderError

# ──────────────────────────────────────────────────────────────────────────────
# /group/members
# ──────────────────────────────────────────────────────────────────────────────


def test_members_returns_json_array_in_collaborator_order(http_client: TestClient) -> None:
    response = http_client.get("/group/members")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == ["5511000000001", "5511000000002", "5511000000003"]


def test_members_provider_error(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    fake_client.failures["get_group_info"] = MessagingProviderError("item-not-found")

    response = http_client.get("/group/members")

    assert response.status_code == 500
    assert response.text == "Failed to get group info: item-not-found"


# ──────────────────────────────────────────────────────────────────────────────
# /group/add e /group/remove
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("path", ["/group/add", "/group/remove"])
@pytest.mark.parametrize("query", ["", "?phone=", "?phone=%20%20"])
def test_missing_phone_is_400_without_collaborator_call(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
    path: str,
    query: str,
) -> None:
    calls_before = list(fake_client.calls)

    response = http_client.get(f"{path}{query}")

    assert response.status_code == 400
    assert response.text == "Missing phone parameter"
    assert fake_client.calls == calls_before


def test_add_then_members_lists_new_member(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    response = http_client.get("/group/add", params={"phone": "5511999990000"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Member added"
    name, args = fake_client.calls[-1]
    assert name == "update_group_participants"
    assert str(args[0]) == "1234567890-123456789@g.us"
    assert [str(jid) for jid in args[1]] == ["5511999990000@s.whatsapp.net"]
    assert args[2] == ParticipantAction.ADD

    assert "5511999990000" in http_client.get("/group/members").json()


def test_remove_member(http_client: TestClient, fake_client: FakeMessagingClient) -> None:
    response = http_client.get("/group/remove?phone=5511000000002")

    assert response.status_code == 200
    assert response.text == "Member removed"
    assert fake_client.members == ["5511000000001", "5511000000003"]


@pytest.mark.parametrize(
    ("path", "prefix"),
    [
        ("/group/add", "Failed to add member: "),
        ("/group/remove", "Failed to remove member: "),
    ],
)
def test_participant_provider_error_keeps_prefix(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
    path: str,
    prefix: str,
) -> None:
    fake_client.failures["update_group_participants"] = MessagingProviderError("forbidden")

    response = http_client.get(path, params={"phone": "123"})

    assert response.status_code == 500
    assert response.text == f"{prefix}forbidden"


# ──────────────────────────────────────────────────────────────────────────────
# /group/send_contact
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "params",
    [{}, {"name": "Bob"}, {"phone": "123"}, {"name": "", "phone": "123"}],
)
def test_send_contact_requires_name_and_phone(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
    params: dict[str, str],
) -> None:
    response = http_client.get("/group/send_contact", params=params)

    assert response.status_code == 400
    assert response.text == "Missing name or phone parameter"
    assert fake_client.sent_messages == []


def test_send_contact_sends_vcard(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    response = http_client.get(
        "/group/send_contact",
        params={"name": "Alice", "phone": "5511999990000"},
    )

    assert response.status_code == 200
    assert response.text == "Contact sent"
    to, message = fake_client.sent_messages[0]
    assert str(to) == "1234567890-123456789@g.us"
    assert message.display_name == "Alice"
    assert message.vcard.split("\n") == [
        "BEGIN:VCARD",
        "VERSION:3.0",
        "FN:Alice",
        "TEL;TYPE=CELL:5511999990000",
        "END:VCARD",
    ]


def test_send_contact_provider_error(
    http_client: TestClient,
    fake_client: FakeMessagingClient,
) -> None:
    fake_client.failures["send_message"] = MessagingProviderError("not connected")

    response = http_client.get("/group/send_contact?name=Alice&phone=123")

    assert response.status_code == 500
    assert response.text == "Failed to send contact: not connected"
