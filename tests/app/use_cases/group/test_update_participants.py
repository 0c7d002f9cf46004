"""Testes do UpdateGroupParticipantsUseCase."""

from __future__ import annotations

import pytest

from app.domain.group import ParticipantAction, ParticipantChangeRequest
from app.domain.jid import parse_group_jid, participant_jid
from app.use_cases.group import (
    PROVIDER_ERROR,
    VALIDATION_ERROR,
    UpdateGroupParticipantsUseCase,
)
from tests.fakes.fake_messaging_client import FakeMessagingClient
from utils.errors import MessagingProviderError

GROUP = parse_group_jid("1234567890-123456789@g.us")


@pytest.mark.asyncio
@pytest.mark.parametrize("phone", ["", "   ", None])
async def test_empty_phone_fails_validation_before_any_call(phone: str | None) -> None:
    client = FakeMessagingClient()
    use_case = UpdateGroupParticipantsUseCase(client, GROUP)

    request = ParticipantChangeRequest(phone, ParticipantAction.ADD)  # type: ignore[arg-type]

    result = await use_case.execute(request)

    assert not result.success
    assert result.error_code == VALIDATION_ERROR
    assert client.calls == []


@pytest.mark.asyncio
async def test_add_sends_single_participant_jid_to_group() -> None:
    client = FakeMessagingClient()
    use_case = UpdateGroupParticipantsUseCase(client, GROUP)

    result = await use_case.execute(
        ParticipantChangeRequest("5511999990000", ParticipantAction.ADD)
    )

    assert result.success
    assert client.calls == [
        (
            "update_group_participants",
            (GROUP, (participant_jid("5511999990000"),), ParticipantAction.ADD),
        )
    ]
    assert client.members == ["5511999990000"]


@pytest.mark.asyncio
async def test_add_twice_keeps_single_membership() -> None:
    client = FakeMessagingClient()
    use_case = UpdateGroupParticipantsUseCase(client, GROUP)
    request = ParticipantChangeRequest("5511999990000", ParticipantAction.ADD)

    first = await use_case.execute(request)
    second = await use_case.execute(request)

    assert first.success
    assert second.success
    assert client.members == ["5511999990000"]


@pytest.mark.asyncio
async def test_remove_member() -> None:
    client = FakeMessagingClient(members=["111", "222"])
    use_case = UpdateGroupParticipantsUseCase(client, GROUP)

    result = await use_case.execute(ParticipantChangeRequest("111", ParticipantAction.REMOVE))

    assert result.success
    assert client.members == ["222"]


@pytest.mark.asyncio
async def test_provider_error_is_returned_not_raised() -> None:
    client = FakeMessagingClient()
    client.failures["update_group_participants"] = MessagingProviderError("not-authorized")
    use_case = UpdateGroupParticipantsUseCase(client, GROUP)

    result = await use_case.execute(ParticipantChangeRequest("111", ParticipantAction.REMOVE))

    assert not result.success
    assert result.error_code == PROVIDER_ERROR
    assert result.error_message == "not-authorized"


@pytest.mark.asyncio
async def test_phone_is_forwarded_as_given() -> None:
    client = FakeMessagingClient()
    use_case = UpdateGroupParticipantsUseCase(client, GROUP)

    result = await use_case.execute(
        ParticipantChangeRequest(" 15551234567", ParticipantAction.ADD)
    )

    assert result.success
    assert client.calls == [
        (
            "update_group_participants",
            (GROUP, (participant_jid(" 15551234567"),), ParticipantAction.ADD),
        )
    ]
