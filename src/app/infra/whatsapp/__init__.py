"""Adapters da biblioteca de mensageria.

`neonize_client` não é importado aqui: a dependência nativa só é
carregada pela factory do bootstrap.
"""

from __future__ import annotations

from app.infra.whatsapp.qr_renderer import TerminalQrRenderer

__all__ = ["TerminalQrRenderer"]
