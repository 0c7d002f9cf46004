"""Stores: implementações concretas de persistência."""

from __future__ import annotations

from app.infra.stores.sqlite_credential_store import SqliteCredentialStore

__all__ = ["SqliteCredentialStore"]
