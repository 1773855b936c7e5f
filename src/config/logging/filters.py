"""Filters de logging para injeção de contexto.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: pyloto_assinaturas)
- campos do escopo ativo (ex: operation, debtor_id), quando houver
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e escopo em cada record de log.

    Importante: nunca adicionar payloads brutos, credenciais ou PII.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
        scope_getter: Função que retorna os campos de escopo atuais.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        scope_getter: Callable[[], dict[str, Any]] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")
        self._get_scope = scope_getter or dict

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; campos passados via `extra` têm precedência.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        for key, value in self._get_scope().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
