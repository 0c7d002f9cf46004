"""Protocolo do store de credenciais do dispositivo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.protocols.models import DeviceIdentity


class CredentialStoreProtocol(Protocol):
    async def load_identity(self) -> DeviceIdentity | None:
        """Retorna a identidade persistida ou None se nunca pareado.

        Raises:
            CredentialStoreUnavailableError: store inacessível.
        """
        ...
