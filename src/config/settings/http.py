"""Settings do listener HTTP."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class HttpSettings:
    """Configurações do servidor HTTP.

    Attributes:
        host: Interface de bind
        port: Porta única do serviço
        drain_timeout_seconds: Janela para requisições em andamento no shutdown
    """

    host: str = "0.0.0.0"
    port: int = 8080
    drain_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append(f"HTTP_PORT fora do intervalo: {self.port}")

        if self.drain_timeout_seconds < 0:
            errors.append("HTTP_DRAIN_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> HttpSettings:
    return HttpSettings(
        host=os.getenv("HTTP_HOST", "0.0.0.0"),
        port=int(os.getenv("HTTP_PORT", "8080")),
        drain_timeout_seconds=float(os.getenv("HTTP_DRAIN_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_http_settings() -> HttpSettings:
    """Retorna instância cacheada de HttpSettings."""
    return _load_from_env()
