"""Gerenciador da sessão persistente de mensageria.

Dono exclusivo do handle compartilhado e do ConnectionState. Conduz o
pareamento (sem identidade) ou a reconexão direta (identidade
persistida) e reporta a conectividade ao vivo.

Falhas de startup são fatais: sem sessão não há o que
servir, e nada aqui é re-tentado automaticamente.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

from fsm import ConnectionState, PairingState, create_connection_fsm
from utils.errors import (
    CredentialStoreUnavailableError,
    MessagingProviderError,
    StartupFatalError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.credential_store import CredentialStoreProtocol
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import DeviceIdentity
    from app.sessions.pairing import PairingFlow, PairingOutcome

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT_SECONDS = 30.0


class SessionManager:
    """Ciclo de vida da sessão: start → (pareamento | reconexão) → disconnect.

    Handlers HTTP só leem (`is_connected`, `state`) ou usam `client`
    para chamadas que não alteram o estado local.
    """

    __slots__ = (
        "_client",
        "_connect_timeout_seconds",
        "_credential_store",
        "_fsm",
        "_pairing_flow_factory",
    )

    def __init__(
        self,
        client: MessagingClientProtocol,
        credential_store: CredentialStoreProtocol,
        pairing_flow_factory: Callable[[], PairingFlow],
        connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
    ) -> None:
        """
        Args:
            client: Handle único da biblioteca de mensageria
            credential_store: Store consultado uma vez no startup
            pairing_flow_factory: Cria um PairingFlow por tentativa
            connect_timeout_seconds: Prazo da reconexão com identidade existente
        """
        self._client = client
        self._credential_store = credential_store
        self._pairing_flow_factory = pairing_flow_factory
        self._connect_timeout_seconds = connect_timeout_seconds
        self._fsm = create_connection_fsm()

    @property
    def client(self) -> MessagingClientProtocol:
        return self._client

    @property
    def state(self) -> ConnectionState:
        return ConnectionState(self._fsm.current_state)

    @property
    def history(self) -> list[dict[str, Any]]:
        return self._fsm.get_history_summary()

    def is_connected(self) -> bool:
        """Leitura pura do socket do colaborador (nunca do estado cacheado)."""
        return self._client.is_connected()

    async def start(self, cancel: asyncio.Event) -> None:
        """Estabelece a sessão.

        Args:
            cancel: Escopo de cancelamento compartilhado; interrompe o pareamento.

        Raises:
            StartupFatalError: store indisponível, falha de conexão,
                cancelamento ou pareamento sem sucesso.
        """
        if self.state != ConnectionState.DISCONNECTED:
            raise RuntimeError(f"SessionManager já iniciado (estado {self.state})")

        identity = await self._load_identity()
        if identity is None:
            await self._pair_and_connect(cancel)
        else:
            await self._reconnect(identity, cancel)

    async def disconnect(self) -> None:
        """Encerra a sessão. Idempotente."""
        if self.state == ConnectionState.DISCONNECTED:
            logger.debug("session_disconnect_skipped", extra={"reason": "already_disconnected"})
            return
        try:
            await self._client.disconnect()
        except MessagingProviderError as exc:
            logger.warning("session_disconnect_failed", extra={"error": str(exc)})
        finally:
            self._transition(ConnectionState.DISCONNECTED, "disconnect")
        logger.info("session_disconnected")

    async def _load_identity(self) -> DeviceIdentity | None:
        try:
            identity = await self._credential_store.load_identity()
        except CredentialStoreUnavailableError as exc:
            raise StartupFatalError("credential_store_unavailable", str(exc)) from exc
        logger.info("credential_store_loaded", extra={"identity_present": identity is not None})
        return identity

    async def _reconnect(self, identity: DeviceIdentity, cancel: asyncio.Event) -> None:
        self._transition(ConnectionState.CONNECTING, "identity_found")
        connect_task = asyncio.create_task(self._client.connect(), name="messaging-connect")
        cancel_task = asyncio.create_task(cancel.wait(), name="connect-cancel")
        try:
            async with asyncio.timeout(self._connect_timeout_seconds):
                await asyncio.wait(
                    {connect_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
                )
        except TimeoutError as exc:
            await _cancel_task(connect_task)
            self._transition(ConnectionState.DISCONNECTED, "connect_timeout")
            raise StartupFatalError(
                "connect_timeout", f"{self._connect_timeout_seconds}s"
            ) from exc
        except BaseException:
            await _cancel_task(connect_task)
            raise
        finally:
            await _cancel_task(cancel_task)

        # Encerramento pedido durante o connect: o socket não chega a servir
        if not connect_task.done():
            await _cancel_task(connect_task)
            await self._abort("connect_cancelled")
            raise StartupFatalError("connect_cancelled", "shutdown requested")

        try:
            connect_task.result()
        except Exception as exc:
            self._transition(ConnectionState.DISCONNECTED, "connect_failed")
            raise StartupFatalError("connect_failed", str(exc)) from exc

        self._transition(ConnectionState.CONNECTED, "reconnected")
        logger.info("session_reconnected", extra={"device": identity.jid})

    async def _pair_and_connect(self, cancel: asyncio.Event) -> None:
        self._transition(ConnectionState.AWAITING_PAIRING, "identity_missing")
        logger.info("pairing_required")

        flow = self._pairing_flow_factory()
        # Stream obtido antes do connect para não perder o primeiro código
        events = self._client.pairing_events()
        pairing_task = asyncio.create_task(flow.run(events, cancel), name="pairing-events")
        connect_task = asyncio.create_task(self._client.connect(), name="messaging-connect")

        try:
            await asyncio.wait({connect_task, pairing_task}, return_when=asyncio.FIRST_COMPLETED)
            # Pareamento falhou antes do socket subir: não esperar o connect
            if not connect_task.done() and not pairing_task.result().succeeded:
                await _cancel_task(connect_task)
            else:
                await connect_task
        except Exception as exc:
            await _cancel_task(pairing_task)
            self._transition(ConnectionState.DISCONNECTED, "connect_failed")
            raise StartupFatalError("connect_failed", str(exc)) from exc
        except BaseException:
            await _cancel_task(connect_task)
            await _cancel_task(pairing_task)
            raise

        outcome = await pairing_task
        if not outcome.succeeded:
            await self._abort("pairing_failed")
            raise StartupFatalError(_fatal_reason(outcome), outcome.reason or "")

        self._transition(
            ConnectionState.CONNECTED,
            "pair_success",
            metadata={"codes_rendered": outcome.codes_rendered},
        )
        logger.info("session_paired")

    async def _abort(self, trigger: str) -> None:
        """Fecha o socket aberto antes de sair sem sessão utilizável."""
        try:
            await self._client.disconnect()
        except MessagingProviderError as exc:
            logger.warning("session_disconnect_failed", extra={"error": str(exc)})
        self._transition(ConnectionState.DISCONNECTED, trigger)

    def _transition(
        self,
        target: ConnectionState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        result = self._fsm.transition(target, trigger=trigger, metadata=metadata)
        if not result.success or result.transition is None:
            raise RuntimeError(result.error_reason)
        logger.info("connection_state_changed", extra=result.transition.to_log_dict())


def _fatal_reason(outcome: PairingOutcome) -> str:
    if outcome.state == PairingState.TIMEOUT:
        return "pairing_timeout"
    if outcome.reason == "cancelled":
        return "pairing_cancelled"
    return "pairing_error"


async def _cancel_task(task: asyncio.Task[Any]) -> None:
    if task.done():
        return
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
