"""Registro de métricas via structured logging.

As métricas são logs estruturados (`metric_type`) agregados depois pelo
backend de logs.

Uso:
    start = time.perf_counter()
    # ... chamada ao provider ...
    record_latency("buckaroo_http_client", "DataRequest", elapsed_ms)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "buckaroo_http_client")
        operation: Nome da operação (ex: "TransactionRequest")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação; usa o do contexto quando None
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )
