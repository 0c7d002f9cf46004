"""Métricas via structured logging.

Latência das chamadas ao colaborador de mensageria, registrada como log
`metric_latency` para agregação posterior.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from app.observability.correlation import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    outcome: str = "ok",
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "group_participants")
        operation: Nome da operação (ex: "update_group_participants")
        latency_ms: Latência em milissegundos
        outcome: "ok" ou "error"
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "outcome": outcome,
            "correlation_id": get_correlation_id(),
        },
    )


@contextmanager
def measure_latency(component: str, operation: str) -> Iterator[None]:
    """Mede o bloco e registra `metric_latency`, inclusive quando ele falha."""
    started_at = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "ok"
    finally:
        record_latency(
            component,
            operation,
            (time.perf_counter() - started_at) * 1000,
            outcome=outcome,
        )
