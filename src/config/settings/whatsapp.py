"""Settings da sessão WhatsApp.

Valores fixos por deploy: local do store de credenciais, grupo
administrado e prazos de conexão/pareamento. Não há recarga em runtime.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_STORE_PATH: str = "./store.db"
DEFAULT_GROUP_JID: str = "1234567890-123456789@g.us"


@dataclass(frozen=True)
class WhatsAppSessionSettings:
    """Configurações da sessão persistente.

    Attributes:
        store_path: Arquivo SQLite do store de credenciais
        group_jid: Identificador do único grupo administrado
        device_name: Nome exibido no aparelho pareado
        pairing_timeout_seconds: Prazo total de uma tentativa de pareamento
        connect_timeout_seconds: Prazo para reconectar com identidade existente
    """

    store_path: str = DEFAULT_STORE_PATH
    group_jid: str = DEFAULT_GROUP_JID
    device_name: str = "wa-group-control"

    pairing_timeout_seconds: float = 180.0
    connect_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas da sessão.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.store_path:
            errors.append("WHATSAPP_STORE_PATH não configurado")

        if not self.group_jid or self.group_jid.startswith("@"):
            errors.append("WHATSAPP_GROUP_JID não configurado")
        elif self.group_jid == DEFAULT_GROUP_JID:
            errors.append("WHATSAPP_GROUP_JID ainda usa o valor de exemplo")

        if self.pairing_timeout_seconds <= 0:
            errors.append("WHATSAPP_PAIRING_TIMEOUT_SECONDS deve ser > 0")

        if self.connect_timeout_seconds <= 0:
            errors.append("WHATSAPP_CONNECT_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSessionSettings:
    """Carrega WhatsAppSessionSettings a partir de variáveis de ambiente."""
    return WhatsAppSessionSettings(
        store_path=os.getenv("WHATSAPP_STORE_PATH", DEFAULT_STORE_PATH),
        group_jid=os.getenv("WHATSAPP_GROUP_JID", DEFAULT_GROUP_JID).strip(),
        device_name=os.getenv("WHATSAPP_DEVICE_NAME", "wa-group-control"),
        pairing_timeout_seconds=float(
            os.getenv("WHATSAPP_PAIRING_TIMEOUT_SECONDS", "180")
        ),
        connect_timeout_seconds=float(
            os.getenv("WHATSAPP_CONNECT_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSessionSettings:
    """Retorna instância cacheada de WhatsAppSessionSettings."""
    return _load_from_env()
