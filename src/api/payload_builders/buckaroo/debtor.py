"""Builders de parâmetros de devedor (CreditManagement3 / dados pessoais)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.buckaroo.constants import (
    DEBTOR_COUNTRY,
    DEFAULT_CULTURE,
    ProtocolField,
    ServiceAction,
    ServiceName,
)
from api.connectors.buckaroo.models import DataRequest, WireParameter
from api.payload_builders.buckaroo.base import build_parameter, build_service_list

if TYPE_CHECKING:
    from app.domain.billing import Debtor, GetDebtorRequest


def build_debtor_info_request(request: GetDebtorRequest) -> DataRequest:
    """Data request CreditManagement3/DebtorInfo para um devedor."""
    return DataRequest(
        services=build_service_list(
            ServiceName.CREDIT_MANAGEMENT,
            ServiceAction.DEBTOR_INFO,
            [build_parameter(ProtocolField.DEBTOR_CODE, str(request.debtor_id))],
        )
    )


def build_debtor_parameters(
    debtor: Debtor,
    culture: str = DEFAULT_CULTURE,
) -> list[WireParameter]:
    """Parâmetros de identificação, endereço e contato do devedor.

    Ordem fixa: Code, pessoa, endereço, email, telefone.
    """
    address = debtor.address
    return [
        build_parameter(ProtocolField.CODE, str(debtor.id)),
        build_parameter(ProtocolField.FIRST_NAME, debtor.first_name),
        build_parameter(ProtocolField.LAST_NAME, debtor.last_name),
        build_parameter(ProtocolField.CULTURE, culture),
        build_parameter(ProtocolField.STREET, address.street),
        build_parameter(ProtocolField.HOUSE_NUMBER, str(address.house_number)),
        build_parameter(ProtocolField.HOUSE_NUMBER_SUFFIX, address.house_number_suffix),
        build_parameter(ProtocolField.ZIP_CODE, address.postal_code),
        build_parameter(ProtocolField.CITY, address.city),
        build_parameter(ProtocolField.COUNTRY, DEBTOR_COUNTRY),
        build_parameter(ProtocolField.EMAIL, debtor.email_address),
        build_parameter(ProtocolField.MOBILE, debtor.phone_number),
    ]
