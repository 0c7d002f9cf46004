"""Protocolo de exibição de códigos de pareamento ao operador."""

from __future__ import annotations

from typing import Protocol


class QrRendererProtocol(Protocol):
    def render(self, code: str) -> None:
        """Exibe o código; retorna apenas depois que ele está visível."""
        ...
