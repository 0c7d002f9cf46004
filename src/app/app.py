"""Entrypoint do serviço de controle de grupo.

Sequência de `serve()`:
    logging → settings → colaboradores → sinais → sessão (pareamento ou
    reconexão) → listener HTTP → espera do shutdown → drenagem.

Uso:
    python -m app.app
    wa-group-control

O listener HTTP só sobe depois que a sessão está conectada; falhas de
startup encerram o processo com código 1.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import math
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_session_manager
from app.domain.jid import parse_group_jid
from app.sessions import ShutdownCoordinator
from config.settings import get_base_settings, get_http_settings, get_whatsapp_settings
from utils.errors import StartupFatalError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Iterator

    from app.domain.jid import Jid
    from app.sessions import SessionManager

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ciclo de vida do app HTTP.

    A sessão é aberta antes e fechada depois do listener, pelo
    ShutdownCoordinator; aqui só registramos as bordas.
    """
    logger.info(
        "app_starting",
        extra={"group_jid": str(app.state.group_jid), "connection_state": app.state.session.state},
    )
    yield
    logger.info("app_shutting_down")


def create_app(session: SessionManager, group_jid: Jid) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        session: Sessão já conectada, compartilhada por todas as requisições
        group_jid: Único grupo administrado

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="wa-group-control",
        description="Controle de um grupo WhatsApp via HTTP",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.session = session
    fastapi_app.state.group_jid = group_jid

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})
    return fastapi_app


class ManagedServer(uvicorn.Server):
    """uvicorn.Server sem handlers de sinal próprios.

    Os sinais pertencem ao ShutdownCoordinator, que decide quando o
    listener deve parar (`should_exit`).
    """

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield

    def install_signal_handlers(self) -> None:
        return None


async def serve() -> int:
    """Executa o serviço até o shutdown.

    Returns:
        Código de saída do processo (0 = shutdown limpo).
    """
    initialize_app()
    try:
        validate_runtime_settings()
    except RuntimeError as exc:
        logger.error("startup_fatal", extra={"reason": "invalid_settings", "detail": str(exc)})
        return EXIT_FAILURE

    wa_settings = get_whatsapp_settings()
    http_settings = get_http_settings()
    try:
        group_jid = parse_group_jid(wa_settings.group_jid)
    except ValueError as exc:
        logger.error("startup_fatal", extra={"reason": "invalid_group_jid", "detail": str(exc)})
        return EXIT_FAILURE

    session = create_session_manager(wa_settings)
    coordinator = ShutdownCoordinator(session, http_settings.drain_timeout_seconds)
    coordinator.install_signal_handlers()
    try:
        return await _run(session, coordinator, group_jid)
    finally:
        coordinator.remove_signal_handlers()


def graceful_shutdown_seconds(drain_timeout_seconds: float) -> int:
    """Janela de drenagem do uvicorn (inteira), arredondada para cima."""
    return math.ceil(drain_timeout_seconds)


async def _run(session: SessionManager, coordinator: ShutdownCoordinator, group_jid: Jid) -> int:
    try:
        await session.start(coordinator.cancel_event)
    except StartupFatalError as exc:
        if coordinator.is_shutting_down:
            logger.info("startup_aborted", extra={"reason": exc.reason})
            return EXIT_OK
        logger.error("startup_fatal", extra={"reason": exc.reason, "detail": exc.detail})
        return EXIT_FAILURE

    http_settings = get_http_settings()
    config = uvicorn.Config(
        create_app(session, group_jid),
        host=http_settings.host,
        port=http_settings.port,
        log_config=None,
        timeout_graceful_shutdown=graceful_shutdown_seconds(http_settings.drain_timeout_seconds),
    )
    server = ManagedServer(config)
    server_task = asyncio.create_task(server.serve(), name="http-listener")
    shutdown_wait = asyncio.create_task(coordinator.wait(), name="shutdown-wait")
    logger.info("http_listener_starting", extra={"host": config.host, "port": config.port})

    await asyncio.wait({server_task, shutdown_wait}, return_when=asyncio.FIRST_COMPLETED)
    listener_crashed = server_task.done() and not coordinator.is_shutting_down
    if listener_crashed:
        error = None if server_task.cancelled() else server_task.exception()
        logger.error("http_listener_stopped", extra={"error": str(error) if error else None})
        coordinator.request_shutdown("listener_stopped")

    shutdown_wait.cancel()
    await coordinator.shutdown(server, server_task)
    return EXIT_FAILURE if listener_crashed else EXIT_OK


def main() -> None:
    """Entrypoint de linha de comando."""
    sys.exit(asyncio.run(serve()))


if __name__ == "__main__":
    main()
