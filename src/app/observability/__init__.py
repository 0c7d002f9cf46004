"""Observabilidade: correlation_id, métricas e redação de PII.

Uso:
    from app.observability import get_correlation_id, measure_latency, hash_phone
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import measure_latency, record_latency
from app.observability.redaction import hash_phone

__all__ = [
    "CORRELATION_HEADER",
    "get_correlation_id",
    "hash_phone",
    "measure_latency",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
