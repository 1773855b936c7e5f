"""Observabilidade — contexto de logs e métricas.

Uso:
    from app.observability import get_correlation_id, log_scope, record_latency
"""

from app.observability.correlation import (
    get_correlation_id,
    get_log_scope,
    log_scope,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency

__all__ = [
    "get_correlation_id",
    "get_log_scope",
    "log_scope",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
