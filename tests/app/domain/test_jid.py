"""Testes de Jid e helpers de parsing."""

from __future__ import annotations

import pytest

from app.domain.jid import GROUP_SERVER, Jid, parse_group_jid, participant_jid


def test_participant_jid_uses_default_user_server() -> None:
    jid = participant_jid("5511999990000")

    assert str(jid) == "5511999990000@s.whatsapp.net"
    assert not jid.is_group


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1234567890-123456789@g.us", "1234567890-123456789@g.us"),
        ("  120363-42@g.us ", "120363-42@g.us"),
        ("120363-42", "120363-42@g.us"),
    ],
)
def test_parse_group_jid_accepts_full_and_bare_forms(raw: str, expected: str) -> None:
    jid = parse_group_jid(raw)

    assert str(jid) == expected
    assert jid.server == GROUP_SERVER
    assert jid.is_group


@pytest.mark.parametrize("raw", ["", "   ", "5511999990000@s.whatsapp.net", "@g.us"])
def test_parse_group_jid_rejects_invalid_values(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_group_jid(raw)


def test_jid_requires_user_and_server() -> None:
    with pytest.raises(ValueError, match="user"):
        Jid(user="", server="g.us")
    with pytest.raises(ValueError, match="server"):
        Jid(user="123", server="")
