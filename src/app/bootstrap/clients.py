"""Factories dos colaboradores externos: mensageria, credenciais e QR."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.stores import SqliteCredentialStore
from app.infra.whatsapp import TerminalQrRenderer
from app.sessions import PairingFlow, SessionManager

if TYPE_CHECKING:
    from app.protocols.credential_store import CredentialStoreProtocol
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.qr_renderer import QrRendererProtocol
    from config.settings import WhatsAppSessionSettings

logger = logging.getLogger(__name__)


def create_messaging_client(settings: WhatsAppSessionSettings) -> MessagingClientProtocol:
    """Cria o handle único da biblioteca de mensageria.

    O import é tardio para que a dependência nativa só seja carregada
    quando o serviço realmente sobe.
    """
    from app.infra.whatsapp.neonize_client import NeonizeMessagingClient

    client = NeonizeMessagingClient(
        store_path=settings.store_path,
        device_name=settings.device_name,
    )
    logger.info("messaging_client_created", extra={"store_path": settings.store_path})
    return client


def create_credential_store(settings: WhatsAppSessionSettings) -> SqliteCredentialStore:
    return SqliteCredentialStore(settings.store_path)


def create_session_manager(
    settings: WhatsAppSessionSettings,
    client: MessagingClientProtocol | None = None,
    credential_store: CredentialStoreProtocol | None = None,
    renderer: QrRendererProtocol | None = None,
) -> SessionManager:
    """Monta o SessionManager com os colaboradores concretos (ou os informados)."""
    qr_renderer = renderer or TerminalQrRenderer()

    def _new_pairing_flow() -> PairingFlow:
        return PairingFlow(qr_renderer, timeout_seconds=settings.pairing_timeout_seconds)

    return SessionManager(
        client=client or create_messaging_client(settings),
        credential_store=credential_store or create_credential_store(settings),
        pairing_flow_factory=_new_pairing_flow,
        connect_timeout_seconds=settings.connect_timeout_seconds,
    )
