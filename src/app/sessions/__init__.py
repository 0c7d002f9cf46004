"""Módulo de sessões de mensageria.

Exporta o gerenciador da sessão, o fluxo de pareamento e o coordenador
de shutdown.
"""

from app.sessions.manager import DEFAULT_CONNECT_TIMEOUT_SECONDS, SessionManager
from app.sessions.pairing import DEFAULT_PAIRING_TIMEOUT_SECONDS, PairingFlow, PairingOutcome
from app.sessions.shutdown import (
    DEFAULT_DRAIN_TIMEOUT_SECONDS,
    ListenerProtocol,
    ShutdownCoordinator,
)

__all__ = [
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_DRAIN_TIMEOUT_SECONDS",
    "DEFAULT_PAIRING_TIMEOUT_SECONDS",
    "ListenerProtocol",
    "PairingFlow",
    "PairingOutcome",
    "SessionManager",
    "ShutdownCoordinator",
]
