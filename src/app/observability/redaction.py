"""Redação de PII para logs."""

from __future__ import annotations

import hashlib


def hash_phone(phone_number: str) -> str:
    """Prefixo curto do SHA-256 do telefone, para correlacionar sem expor."""
    return hashlib.sha256(phone_number.encode()).hexdigest()[:12]
