"""Protocolo da biblioteca de mensageria (colaborador externo).

O handle é único por processo e compartilhado por todas as requisições;
as chamadas abaixo são seguras para uso concorrente pelo colaborador.
Falhas são sinalizadas com `MessagingProviderError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Sequence

    from app.domain.group import GroupInfo, ParticipantAction
    from app.domain.jid import Jid
    from app.protocols.models import ContactMessage, PairingEvent


class MessagingClientProtocol(Protocol):
    async def connect(self) -> None:
        """Abre o socket; retorna quando a conexão foi estabelecida."""
        ...

    async def disconnect(self) -> None: ...

    def is_connected(self) -> bool:
        """Estado vivo do socket; não bloqueia."""
        ...

    def pairing_events(self) -> AsyncIterator[PairingEvent]:
        """Sequência lazy de eventos de uma tentativa de pareamento.

        Deve ser obtida antes de `connect()`; cada chamada inicia uma
        nova tentativa.
        """
        ...

    async def get_group_info(self, group: Jid) -> GroupInfo: ...

    async def update_group_participants(
        self,
        group: Jid,
        participants: Sequence[Jid],
        action: ParticipantAction,
    ) -> None: ...

    async def send_message(self, to: Jid, message: ContactMessage) -> str:
        """Envia a mensagem e retorna o id atribuído pelo colaborador."""
        ...
