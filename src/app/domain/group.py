"""Modelos de grupo e de alteração de participantes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from app.domain.jid import Jid


class ParticipantAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class ParticipantChangeRequest:
    """Pedido de inclusão/remoção montado a partir da query string."""

    phone_number: str
    action: ParticipantAction


@dataclass(frozen=True, slots=True)
class GroupParticipant:
    jid: Jid
    is_admin: bool = False


@dataclass(frozen=True, slots=True)
class GroupInfo:
    """Metadados do grupo conforme retornados pelo colaborador.

    A ordem de `participants` é a ordem da resposta do colaborador.
    """

    jid: Jid
    name: str = ""
    participants: tuple[GroupParticipant, ...] = ()

    @property
    def member_users(self) -> list[str]:
        return [participant.jid.user for participant in self.participants]
