"""Exceções compartilhadas do serviço."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (colaboradores externos)."""


class MessagingProviderError(InfrastructureError):
    """Falha em chamada à biblioteca de mensageria (rede, protocolo, not-found)."""


class CredentialStoreUnavailableError(InfrastructureError):
    """Store de credenciais inacessível ou corrompido."""


class StartupFatalError(RuntimeError):
    """Falha irrecuperável de startup: o processo deve encerrar.

    Attributes:
        reason: Código curto e estável para logs (ex: "pairing_timeout").
    """

    def __init__(self, reason: str, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}" if detail else reason)
