"""Protocolos e contratos do core da aplicação."""

from .credential_store import CredentialStoreProtocol
from .messaging_client import MessagingClientProtocol
from .models import ContactMessage, DeviceIdentity, PairingEvent, PairingEventKind
from .qr_renderer import QrRendererProtocol
from .validator import ValidationError, require_non_empty

__all__ = [
    "ContactMessage",
    "CredentialStoreProtocol",
    "DeviceIdentity",
    "MessagingClientProtocol",
    "PairingEvent",
    "PairingEventKind",
    "QrRendererProtocol",
    "ValidationError",
    "require_non_empty",
]
