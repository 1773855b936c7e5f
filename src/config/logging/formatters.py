"""Formatter JSON dos logs do gateway.

Ordem das chaves no JSON:
1. Campos obrigatórios (REQUIRED_LOG_FIELDS, ordem fixa)
2. Campos do escopo de operação (SCOPE_LOG_FIELDS), quando presentes
3. Demais campos de `extra=`

Valores de chaves sensíveis (REDACTED_LOG_FIELDS) são mascarados.
"""

from __future__ import annotations

from typing import Any

from pythonjsonlogger.json import JsonFormatter

# Ordem estável entre processos (tupla, não set)
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

SCOPE_LOG_FIELDS: tuple[str, ...] = ("operation", "debtor_id")

REDACTED_LOG_FIELDS = frozenset({"private_key", "website_key", "authorization", "signature"})
REDACTED_VALUE = "***"

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


class GatewayJsonFormatter(JsonFormatter):
    """JsonFormatter com escopo em posição fixa e credenciais mascaradas."""

    def process_log_record(self, log_data: dict[str, Any]) -> dict[str, Any]:
        ordered: dict[str, Any] = {}
        for field in REQUIRED_LOG_FIELDS:
            key = FIELD_RENAME_MAP.get(field, field)
            if key in log_data:
                ordered[key] = log_data.pop(key)
        for field in SCOPE_LOG_FIELDS:
            if field in log_data:
                ordered[field] = log_data.pop(field)
        ordered.update(log_data)

        for key in ordered:
            if key.lower() in REDACTED_LOG_FIELDS:
                ordered[key] = REDACTED_VALUE
        return super().process_log_record(ordered)


def create_json_formatter() -> GatewayJsonFormatter:
    """Cria o formatter JSON do serviço.

    Exemplo de output:
        {"asctime": "...", "level": "INFO",
         "logger": "api.connectors.buckaroo.gateway",
         "message": "buckaroo_debtor_found", "correlation_id": "abc-123",
         "service": "pyloto_assinaturas", "operation": "get_debtor",
         "debtor_id": "5f0c..."}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return GatewayJsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
