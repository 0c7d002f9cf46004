"""Fluxo de pareamento por QR code.

Executado apenas quando não existe identidade persistida. Consome o
stream de eventos de uma tentativa em uma task dedicada, concorrente
com o `connect()` inicial, até um estado terminal.

Garantia de ordem: cada código é exibido (renderer retornou) antes de
o próximo evento ser consumido; portanto todo código observado é
exibido antes do evento terminal da tentativa.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.models import PairingEventKind
from fsm import PairingState, create_pairing_fsm

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from app.protocols.models import PairingEvent
    from app.protocols.qr_renderer import QrRendererProtocol

logger = logging.getLogger(__name__)

DEFAULT_PAIRING_TIMEOUT_SECONDS = 180.0

_STREAM_END = object()
_CANCELLED = object()


@dataclass(frozen=True, slots=True)
class PairingOutcome:
    """Resultado terminal de uma tentativa de pareamento."""

    state: PairingState
    codes_rendered: int = 0
    reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == PairingState.SUCCESS


class PairingFlow:
    """Máquina IDLE → WAITING_FOR_SCAN → {SUCCESS, TIMEOUT, ERROR}.

    Uma instância por tentativa; `run()` só pode ser chamado uma vez.
    """

    __slots__ = ("_codes_rendered", "_fsm", "_renderer", "_timeout_seconds")

    def __init__(
        self,
        renderer: QrRendererProtocol,
        timeout_seconds: float = DEFAULT_PAIRING_TIMEOUT_SECONDS,
    ) -> None:
        """
        Args:
            renderer: Exibe cada código ao operador
            timeout_seconds: Prazo total da tentativa; ao expirar → TIMEOUT
        """
        self._renderer = renderer
        self._timeout_seconds = timeout_seconds
        self._fsm = create_pairing_fsm()
        self._codes_rendered = 0

    @property
    def state(self) -> PairingState:
        return PairingState(self._fsm.current_state)

    @property
    def codes_rendered(self) -> int:
        return self._codes_rendered

    @property
    def history(self) -> list[dict[str, object]]:
        return self._fsm.get_history_summary()

    async def run(
        self,
        events: AsyncIterator[PairingEvent],
        cancel: asyncio.Event,
    ) -> PairingOutcome:
        """Consome eventos até um estado terminal.

        Args:
            events: Stream de eventos desta tentativa
            cancel: Escopo de cancelamento compartilhado (shutdown)

        Returns:
            PairingOutcome terminal (nunca levanta por falha do colaborador)
        """
        if self._fsm.current_state != PairingState.IDLE:
            raise RuntimeError("PairingFlow já executado; crie um por tentativa")

        logger.info("pairing_started", extra={"timeout_seconds": self._timeout_seconds})
        try:
            async with asyncio.timeout(self._timeout_seconds):
                return await self._consume(events, cancel)
        except TimeoutError:
            return self._resolve(PairingState.TIMEOUT, "deadline_exceeded")

    async def _consume(
        self,
        events: AsyncIterator[PairingEvent],
        cancel: asyncio.Event,
    ) -> PairingOutcome:
        iterator = aiter(events)
        while True:
            try:
                event = await _next_event(iterator, cancel)
            except Exception:
                logger.exception("pairing_stream_failed")
                return self._resolve(PairingState.ERROR, "stream_failed")
            if event is _CANCELLED:
                return self._resolve(PairingState.ERROR, "cancelled")
            if event is _STREAM_END:
                return self._resolve(PairingState.ERROR, "stream_closed")

            if event.kind == PairingEventKind.CODE:
                if not self._show_code(event.code or ""):
                    return self._resolve(PairingState.ERROR, "render_failed")
                continue

            if event.kind == PairingEventKind.SUCCESS:
                if self._fsm.current_state == PairingState.IDLE:
                    return self._resolve(PairingState.ERROR, "success_before_code")
                return self._resolve(PairingState.SUCCESS)

            if event.kind == PairingEventKind.TIMEOUT:
                return self._resolve(PairingState.TIMEOUT, "codes_expired")

            return self._resolve(PairingState.ERROR, event.error or "collaborator_error")

    def _show_code(self, code: str) -> bool:
        if self._fsm.current_state == PairingState.IDLE:
            self._fsm.transition(PairingState.WAITING_FOR_SCAN, trigger="code_received")
        try:
            self._renderer.render(code)
        except Exception:
            logger.exception("pairing_code_render_failed")
            return False
        self._codes_rendered += 1
        logger.info("pairing_code_rendered", extra={"rotation": self._codes_rendered})
        return True

    def _resolve(self, target: PairingState, reason: str | None = None) -> PairingOutcome:
        result = self._fsm.transition(
            target,
            trigger=reason or "pair_success",
            metadata={"codes_rendered": self._codes_rendered},
        )
        if not result.success:
            raise RuntimeError(result.error_reason)

        outcome = PairingOutcome(
            state=target,
            codes_rendered=self._codes_rendered,
            reason=reason,
        )
        extra = {"state": target.name, "reason": reason, "codes_rendered": self._codes_rendered}
        if outcome.succeeded:
            logger.info("pairing_succeeded", extra=extra)
        else:
            logger.warning("pairing_failed", extra=extra)
        return outcome


async def _next_event(
    iterator: AsyncIterator[PairingEvent],
    cancel: asyncio.Event,
) -> object:
    """Próximo evento, `_STREAM_END` ou `_CANCELLED` (o que vier primeiro)."""
    if cancel.is_set():
        return _CANCELLED

    async def _read() -> object:
        return await anext(iterator, _STREAM_END)

    read_task = asyncio.ensure_future(_read())
    cancel_task = asyncio.ensure_future(cancel.wait())
    try:
        done, _pending = await asyncio.wait(
            {read_task, cancel_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
        if read_task in done:
            return read_task.result()
        return _CANCELLED
    finally:
        for task in (read_task, cancel_task):
            if not task.done():
                task.cancel()
        await asyncio.gather(read_task, cancel_task, return_exceptions=True)
