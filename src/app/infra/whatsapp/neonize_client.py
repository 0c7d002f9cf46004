"""Cliente de mensageria sobre neonize (binding Python do whatsmeow).

A biblioteca é síncrona e `NewClient.connect()` bloqueia enquanto o
socket estiver ativo; por isso o loop do cliente roda em uma thread
dedicada e as demais chamadas passam por `asyncio.to_thread`.

Callbacks da biblioteca chegam em threads próprias e são repassados ao
event loop via `call_soon_threadsafe`.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import TYPE_CHECKING, Any

from neonize.client import NewClient
from neonize.events import ConnectedEv, DisconnectedEv, LoggedOutEv, PairStatusEv
from neonize.proto.waE2E.WAWebProtobufsE2E_pb2 import ContactMessage as WAContactMessage
from neonize.proto.waE2E.WAWebProtobufsE2E_pb2 import Message
from neonize.utils.enum import ParticipantChange
from neonize.utils.jid import build_jid

from app.domain.group import GroupInfo, GroupParticipant, ParticipantAction
from app.domain.jid import Jid
from app.protocols.models import PairingEvent
from utils.errors import MessagingProviderError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Sequence

    from app.protocols.models import ContactMessage

logger = logging.getLogger(__name__)

_PARTICIPANT_CHANGES = {
    ParticipantAction.ADD: ParticipantChange.ADD,
    ParticipantAction.REMOVE: ParticipantChange.REMOVE,
}


class NeonizeMessagingClient:
    """Implementação de MessagingClientProtocol com neonize."""

    def __init__(self, store_path: str, device_name: str) -> None:
        self._client = NewClient(store_path)
        self._device_name = device_name
        self._loop: asyncio.AbstractEventLoop | None = None
        self._ready: asyncio.Event | None = None
        self._pairing_queue: asyncio.Queue[PairingEvent] | None = None
        self._runner: threading.Thread | None = None
        self._runner_error: BaseException | None = None
        self._register_callbacks()

    def _register_callbacks(self) -> None:
        self._client.qr(self._on_qr)
        self._client.event(ConnectedEv)(self._on_connected)
        self._client.event(PairStatusEv)(self._on_pair_status)
        self._client.event(LoggedOutEv)(self._on_logged_out)
        self._client.event(DisconnectedEv)(self._on_disconnected)

    # ──────────────────────────────────────────────────────────────
    # Ciclo de vida
    # ──────────────────────────────────────────────────────────────

    async def connect(self) -> None:
        """Inicia o loop do cliente e retorna quando o socket está ativo.

        Sem identidade, "ativo" significa o primeiro código de pareamento
        emitido; com identidade, o evento de conexão.
        """
        ready = self._bind_loop()
        ready.clear()
        self._runner_error = None
        self._runner = threading.Thread(
            target=self._run_client,
            name="neonize-client",
            daemon=True,
        )
        self._runner.start()
        await ready.wait()
        if self._runner_error is not None:
            raise MessagingProviderError(str(self._runner_error)) from self._runner_error

    async def disconnect(self) -> None:
        await self._call(self._client.disconnect)
        if self._runner is not None:
            await asyncio.to_thread(self._runner.join, 5.0)

    def is_connected(self) -> bool:
        return bool(self._client.is_connected)

    def pairing_events(self) -> AsyncIterator[PairingEvent]:
        self._bind_loop()
        self._pairing_queue = asyncio.Queue()
        return self._drain_pairing_queue(self._pairing_queue)

    # ──────────────────────────────────────────────────────────────
    # Grupo e mensagens
    # ──────────────────────────────────────────────────────────────

    async def get_group_info(self, group: Jid) -> GroupInfo:
        info = await self._call(self._client.get_group_info, _to_wa_jid(group))
        participants = tuple(
            GroupParticipant(
                jid=Jid(user=p.JID.User, server=p.JID.Server),
                is_admin=bool(p.IsAdmin),
            )
            for p in info.Participants
        )
        return GroupInfo(jid=group, name=info.GroupName.Name, participants=participants)

    async def update_group_participants(
        self,
        group: Jid,
        participants: Sequence[Jid],
        action: ParticipantAction,
    ) -> None:
        await self._call(
            self._client.update_group_participants,
            _to_wa_jid(group),
            [_to_wa_jid(p) for p in participants],
            _PARTICIPANT_CHANGES[action],
        )

    async def send_message(self, to: Jid, message: ContactMessage) -> str:
        wa_message = Message(
            contactMessage=WAContactMessage(
                displayName=message.display_name,
                vcard=message.vcard,
            )
        )
        response = await self._call(self._client.send_message, _to_wa_jid(to), wa_message)
        return str(response.ID)

    # ──────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────

    def _bind_loop(self) -> asyncio.Event:
        if self._loop is None or self._ready is None:
            self._loop = asyncio.get_running_loop()
            self._ready = asyncio.Event()
        return self._ready

    def _run_client(self) -> None:
        try:
            self._client.connect()
        except Exception as exc:
            logger.exception("neonize_client_crashed")
            self._runner_error = exc
        finally:
            self._notify(self._mark_ready)

    async def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return await asyncio.to_thread(func, *args)
        except Exception as exc:
            raise MessagingProviderError(str(exc)) from exc

    async def _drain_pairing_queue(
        self,
        queue: asyncio.Queue[PairingEvent],
    ) -> AsyncIterator[PairingEvent]:
        while True:
            event = await queue.get()
            yield event
            if event.is_terminal:
                return

    def _notify(self, callback: Callable[..., None], *args: Any) -> None:
        if self._loop is not None and not self._loop.is_closed():
            self._loop.call_soon_threadsafe(callback, *args)

    def _mark_ready(self) -> None:
        if self._ready is not None:
            self._ready.set()

    def _publish(self, event: PairingEvent) -> None:
        if self._pairing_queue is not None:
            self._pairing_queue.put_nowait(event)

    def _on_qr(self, _client: NewClient, data_qr: bytes) -> None:
        self._notify(self._publish, PairingEvent.code_event(data_qr.decode()))
        self._notify(self._mark_ready)

    def _on_connected(self, _client: NewClient, _event: ConnectedEv) -> None:
        logger.info("neonize_connected", extra={"device_name": self._device_name})
        self._notify(self._mark_ready)

    def _on_pair_status(self, _client: NewClient, event: PairStatusEv) -> None:
        if event.Status != PairStatusEv.SUCCESS:
            logger.warning("neonize_pair_failed", extra={"error": event.Error})
            self._notify(self._publish, PairingEvent.failure(event.Error or "pair_error"))
            return
        logger.info("neonize_pair_success", extra={"device": event.ID.User})
        self._notify(self._publish, PairingEvent.success())

    def _on_logged_out(self, _client: NewClient, _event: LoggedOutEv) -> None:
        logger.warning("neonize_logged_out")
        self._notify(self._publish, PairingEvent.failure("logged_out"))

    def _on_disconnected(self, _client: NewClient, _event: DisconnectedEv) -> None:
        logger.warning("neonize_disconnected")


def _to_wa_jid(jid: Jid) -> Any:
    return build_jid(jid.user, jid.server)
