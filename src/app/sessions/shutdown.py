"""Coordenação de shutdown gracioso.

Política de drenagem:
1. Sinal (SIGINT/SIGTERM) → `request_shutdown()` marca o escopo de
   cancelamento compartilhado.
2. O listener HTTP para de aceitar conexões; requisições em andamento
   têm até `drain_timeout_seconds` para terminar.
3. Só então a sessão de mensageria é encerrada.

Requisições em andamento nunca são abortadas por este módulo.
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.sessions.manager import SessionManager

logger = logging.getLogger(__name__)

DEFAULT_DRAIN_TIMEOUT_SECONDS = 10.0
DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)

# Folga além do timeout do listener para ele fechar conexões e sair do loop
_LISTENER_EXIT_GRACE_SECONDS = 2.0


class ListenerProtocol(Protocol):
    """Subconjunto de `uvicorn.Server` usado na drenagem."""

    should_exit: bool


class ShutdownCoordinator:
    """Decisão única de "parar agora" e ordem de encerramento."""

    def __init__(
        self,
        session: SessionManager,
        drain_timeout_seconds: float = DEFAULT_DRAIN_TIMEOUT_SECONDS,
        signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
    ) -> None:
        self._session = session
        self._drain_timeout_seconds = drain_timeout_seconds
        self._signals = tuple(signals)
        self._cancel = asyncio.Event()
        self._reason: str | None = None
        self._installed_on: asyncio.AbstractEventLoop | None = None

    @property
    def cancel_event(self) -> asyncio.Event:
        """Escopo de cancelamento compartilhado com o pareamento."""
        return self._cancel

    @property
    def is_shutting_down(self) -> bool:
        return self._cancel.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    @property
    def drain_timeout_seconds(self) -> float:
        return self._drain_timeout_seconds

    def install_signal_handlers(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Registra os handlers de sinal no loop em execução."""
        loop = loop or asyncio.get_running_loop()
        for sig in self._signals:
            loop.add_signal_handler(sig, self.request_shutdown, sig.name)
        self._installed_on = loop
        logger.debug(
            "signal_handlers_installed",
            extra={"signals": [sig.name for sig in self._signals]},
        )

    def remove_signal_handlers(self) -> None:
        if self._installed_on is None:
            return
        for sig in self._signals:
            self._installed_on.remove_signal_handler(sig)
        self._installed_on = None

    def request_shutdown(self, reason: str = "requested") -> bool:
        """Marca o shutdown. Idempotente.

        Returns:
            True na primeira chamada; False se já estava em shutdown.
        """
        if self._cancel.is_set():
            logger.debug("shutdown_already_requested", extra={"reason": reason})
            return False
        self._reason = reason
        self._cancel.set()
        logger.info("shutdown_requested", extra={"reason": reason})
        return True

    async def wait(self) -> None:
        await self._cancel.wait()

    async def shutdown(
        self,
        listener: ListenerProtocol | None = None,
        listener_task: asyncio.Task[Any] | None = None,
    ) -> None:
        """Drena o listener HTTP e então encerra a sessão.

        Args:
            listener: Servidor que deve parar de aceitar conexões
            listener_task: Task do servidor; aguardada até o prazo de drenagem
        """
        self.request_shutdown("shutdown")

        if listener is not None:
            listener.should_exit = True

        if listener_task is not None and not listener_task.done():
            deadline = self._drain_timeout_seconds + _LISTENER_EXIT_GRACE_SECONDS
            _done, pending = await asyncio.wait({listener_task}, timeout=deadline)
            if pending:
                logger.warning(
                    "http_drain_timeout",
                    extra={"drain_timeout_seconds": self._drain_timeout_seconds},
                )

        await self._session.disconnect()
        logger.info("shutdown_complete", extra={"reason": self._reason})
