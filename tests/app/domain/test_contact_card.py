"""Testes do vCard gerado por ContactCard."""

from __future__ import annotations

from app.domain.contact_card import ContactCard, escape_vcard_text


def test_to_vcard_emits_expected_lines_in_order() -> None:
    vcard = ContactCard(display_name="Alice", phone_number="5511999990000").to_vcard()

    assert vcard.split("\n") == [
        "BEGIN:VCARD",
        "VERSION:3.0",
        "FN:Alice",
        "TEL;TYPE=CELL:5511999990000",
        "END:VCARD",
    ]


def test_plain_values_are_emitted_verbatim() -> None:
    vcard = ContactCard(display_name="Maria da Silva", phone_number="+55 11 99999").to_vcard()

    assert "FN:Maria da Silva" in vcard
    assert "TEL;TYPE=CELL:+55 11 99999" in vcard


def test_special_characters_cannot_break_the_block() -> None:
    vcard = ContactCard(
        display_name="Evil\nEND:VCARD",
        phone_number="1\nEND:VCARD",
    ).to_vcard()

    lines = vcard.split("\n")
    assert len(lines) == 5
    assert lines[2] == "FN:Evil\\nEND:VCARD"
    assert lines[3] == "TEL;TYPE=CELL:1END:VCARD"


def test_escape_vcard_text() -> None:
    assert escape_vcard_text("a\\b,c;d\r\ne") == "a\\\\b\\,c\\;d\\ne"


def test_phone_number_is_not_text_escaped() -> None:
    vcard = ContactCard(display_name="Bob, Jr.", phone_number="+1 555,123;9").to_vcard()

    lines = vcard.split("\n")
    assert lines[2] == "FN:Bob\\, Jr."
    assert lines[3] == "TEL;TYPE=CELL:+1 555,123;9"
