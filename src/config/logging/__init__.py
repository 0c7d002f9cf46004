"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="wa_group_control")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("session_connected", extra={"state": "CONNECTED"})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Telefones nunca aparecem em claro nos logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
