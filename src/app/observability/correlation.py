"""Contexto de rastreamento para logs: correlation_id e escopo de operação.

Ambos usam ContextVar, portanto são isolados por task asyncio e seguros
sob chamadas concorrentes ao gateway.

Uso:
    from app.observability import log_scope, set_correlation_id

    token = set_correlation_id(request_id)
    try:
        with log_scope(operation="get_debtor", debtor_id=str(debtor_id)):
            ...  # todo log emitido aqui recebe operation e debtor_id
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_scope: ContextVar[Mapping[str, Any]] = ContextVar("log_scope", default={})


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID v4 quando None.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def get_log_scope() -> dict[str, Any]:
    """Cópia dos campos de escopo ativos no contexto atual."""
    return dict(_scope.get())


@contextmanager
def log_scope(**fields: Any) -> Iterator[dict[str, Any]]:
    """Adiciona campos ao escopo de log enquanto o bloco executa.

    Escopos aninhados herdam os campos do escopo externo; valores
    repetidos são sobrescritos apenas dentro do bloco interno.
    """
    merged = {**_scope.get(), **fields}
    token = _scope.set(merged)
    try:
        yield merged
    finally:
        _scope.reset(token)
