"""Modelos trocados com a biblioteca de mensageria."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class DeviceIdentity:
    """Identidade persistida do dispositivo (opaca; só a presença importa)."""

    jid: str


@dataclass(frozen=True, slots=True)
class ContactMessage:
    """Mensagem estruturada de contato (display name + vCard)."""

    display_name: str
    vcard: str


class PairingEventKind(StrEnum):
    CODE = "code"
    SUCCESS = "success"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class PairingEvent:
    """Evento do stream de pareamento.

    `code` só é preenchido em eventos CODE; `error` só em eventos ERROR.
    """

    kind: PairingEventKind
    code: str | None = None
    error: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != PairingEventKind.CODE

    @classmethod
    def code_event(cls, code: str) -> PairingEvent:
        return cls(kind=PairingEventKind.CODE, code=code)

    @classmethod
    def success(cls) -> PairingEvent:
        return cls(kind=PairingEventKind.SUCCESS)

    @classmethod
    def timeout(cls) -> PairingEvent:
        return cls(kind=PairingEventKind.TIMEOUT)

    @classmethod
    def failure(cls, error: str) -> PairingEvent:
        return cls(kind=PairingEventKind.ERROR, error=error)
