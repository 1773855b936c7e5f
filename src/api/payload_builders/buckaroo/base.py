"""Helpers comuns para builders Buckaroo."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.buckaroo.constants import DATE_FORMAT
from api.connectors.buckaroo.models import (
    ServiceListRequest,
    ServiceRequest,
    WireParameter,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date
    from decimal import Decimal

    from api.connectors.buckaroo.constants import (
        ProtocolField,
        ServiceAction,
        ServiceName,
    )


def build_parameter(field: ProtocolField, value: str | None) -> WireParameter:
    """Cria o parâmetro wire com Name/GroupType/GroupID da tabela do protocolo."""
    return WireParameter(
        name=field.field_name,
        group_type=field.group_type,
        group_id=field.group_id,
        value=value if value is not None else "",
    )


def build_service_list(
    name: ServiceName,
    action: ServiceAction,
    parameters: Iterable[WireParameter],
) -> ServiceListRequest:
    """Envelope Services.ServiceList com um único serviço."""
    return ServiceListRequest(
        service_list=[
            ServiceRequest(name=name, action=action, parameters=list(parameters)),
        ]
    )


def format_decimal(value: Decimal) -> str:
    """Notação invariante (ponto decimal, sem milhar, escala preservada)."""
    return format(value, "f")


def format_date(value: date | None) -> str:
    return value.strftime(DATE_FORMAT) if value is not None else ""
