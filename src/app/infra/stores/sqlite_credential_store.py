"""Leitura do store de credenciais do dispositivo (SQLite).

O arquivo é escrito pela biblioteca de mensageria; aqui só se verifica
se já existe um dispositivo pareado. Nunca escreve.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from app.protocols.models import DeviceIdentity
from utils.errors import CredentialStoreUnavailableError

logger = logging.getLogger(__name__)

DEVICE_TABLE = "whatsmeow_device"


class SqliteCredentialStore:
    """Store de credenciais sobre o SQLite da biblioteca de mensageria.

    Arquivo ou tabela inexistentes equivalem a "nunca pareado".
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def load_identity(self) -> DeviceIdentity | None:
        return await asyncio.to_thread(self._load_identity_sync)

    def _load_identity_sync(self) -> DeviceIdentity | None:
        if not self._path.exists():
            logger.info("credential_store_missing", extra={"path": str(self._path)})
            return None

        try:
            with closing(sqlite3.connect(self._path)) as conn:
                conn.execute("PRAGMA foreign_keys = ON")
                if not _has_device_table(conn):
                    return None
                row = conn.execute(f"SELECT jid FROM {DEVICE_TABLE} LIMIT 1").fetchone()
        except sqlite3.Error as exc:
            raise CredentialStoreUnavailableError(
                f"Falha ao ler store de credenciais {self._path}: {exc}"
            ) from exc

        if row is None or not row[0]:
            return None
        return DeviceIdentity(jid=str(row[0]))


def _has_device_table(conn: sqlite3.Connection) -> bool:
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
        (DEVICE_TABLE,),
    ).fetchone()
    return row is not None
