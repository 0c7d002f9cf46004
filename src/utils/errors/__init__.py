"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CredentialStoreUnavailableError,
    InfrastructureError,
    MessagingProviderError,
    StartupFatalError,
)

__all__ = [
    "CredentialStoreUnavailableError",
    "InfrastructureError",
    "MessagingProviderError",
    "StartupFatalError",
]
