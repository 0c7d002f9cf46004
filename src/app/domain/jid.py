"""Identificadores roteáveis (JID) do protocolo de mensageria.

Um JID é `user@server`; o servidor distingue participantes
(`s.whatsapp.net`) de grupos (`g.us`).
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_USER_SERVER = "s.whatsapp.net"
GROUP_SERVER = "g.us"


@dataclass(frozen=True, slots=True)
class Jid:
    """Endereço de participante ou grupo."""

    user: str
    server: str

    def __post_init__(self) -> None:
        if not self.user:
            raise ValueError("user não pode ser vazio")
        if not self.server:
            raise ValueError("server não pode ser vazio")

    @property
    def is_group(self) -> bool:
        return self.server == GROUP_SERVER

    def __str__(self) -> str:
        return f"{self.user}@{self.server}"


def participant_jid(phone_number: str) -> Jid:
    """Monta o JID de participante a partir do telefone (sem validação de formato)."""
    return Jid(user=phone_number, server=DEFAULT_USER_SERVER)


def parse_group_jid(raw: str) -> Jid:
    """Converte o identificador configurado em JID de grupo.

    Aceita a forma completa (`123-456@g.us`) ou apenas a parte local.

    Raises:
        ValueError: Se vazio ou se o servidor não for de grupo.
    """
    value = raw.strip()
    if not value:
        raise ValueError("JID de grupo vazio")
    user, sep, server = value.partition("@")
    if not sep:
        return Jid(user=user, server=GROUP_SERVER)
    if server != GROUP_SERVER:
        raise ValueError(f"JID não pertence ao domínio de grupos: {value}")
    return Jid(user=user, server=server)
