"""Helpers de logging para a API Buckaroo (sem PII nem credenciais)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.connectors.buckaroo.models import ResponseStatus

logger = logging.getLogger(__name__)


def log_transport_error(
    exc: BaseException,
    operation: str,
    endpoint: str,
    status_code: int | None = None,
) -> None:
    """Loga falha de transporte com o contexto da operação."""
    logger.error(
        "buckaroo_transport_error",
        extra={
            "operation": operation,
            "endpoint": endpoint,
            "status_code": status_code,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


def log_success(operation: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "buckaroo_request_ok",
        extra={
            "operation": operation,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_unexpected_status(operation: str, status: ResponseStatus) -> None:
    """Loga status de negócio não mapeado (nunca inclui parâmetros)."""
    logger.warning(
        "buckaroo_unexpected_status",
        extra={
            "operation": operation,
            "status_code": status.code.code,
            "status_description": status.description,
            "sub_status_code": status.sub_code.code if status.sub_code else None,
            "sub_status_description": status.sub_description,
        },
    )
