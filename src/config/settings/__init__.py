"""Agregador de settings.

Re-exporta as settings de cada domínio para uso externo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.http import HttpSettings, get_http_settings
from config.settings.whatsapp import (
    DEFAULT_GROUP_JID,
    DEFAULT_STORE_PATH,
    WhatsAppSessionSettings,
    get_whatsapp_settings,
)

__all__ = [
    "DEFAULT_GROUP_JID",
    "DEFAULT_STORE_PATH",
    "BaseSettings",
    "Environment",
    "HttpSettings",
    "WhatsAppSessionSettings",
    "get_base_settings",
    "get_http_settings",
    "get_whatsapp_settings",
]
