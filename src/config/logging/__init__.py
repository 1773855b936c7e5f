"""Logging estruturado JSON do serviço.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="pyloto_assinaturas")
    logger = get_logger(__name__)

Todo log carrega correlation_id, service, level, logger, message, asctime
e os campos do escopo de operação ativo. Nunca logar website key,
private key, assinaturas ou dados pessoais do devedor.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REDACTED_LOG_FIELDS,
    REQUIRED_LOG_FIELDS,
    SCOPE_LOG_FIELDS,
    GatewayJsonFormatter,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED_LOG_FIELDS",
    "REQUIRED_LOG_FIELDS",
    "SCOPE_LOG_FIELDS",
    "CorrelationIdFilter",
    "GatewayJsonFormatter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
