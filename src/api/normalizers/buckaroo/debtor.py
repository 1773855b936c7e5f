"""Normalização de DebtorInfo (Buckaroo) para o modelo Debtor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.buckaroo.constants import ProtocolField
from api.normalizers.buckaroo.parameters import ParameterList
from app.domain.billing import Address, Debtor

if TYPE_CHECKING:
    from api.connectors.buckaroo.models import DebtorInfoResponse


def normalize_debtor(response: DebtorInfoResponse) -> Debtor:
    """Converte a resposta de DebtorInfo em Debtor.

    Raises:
        GatewayProtocolError: Parâmetro ausente, duplicado ou mal formado
    """
    parameters = ParameterList.from_response(response)
    return Debtor(
        id=parameters.get_uuid(ProtocolField.CODE.field_name),
        first_name=parameters.get_string(ProtocolField.FIRST_NAME.field_name),
        last_name=parameters.get_string(ProtocolField.LAST_NAME.field_name),
        email_address=parameters.get_string(ProtocolField.EMAIL.field_name),
        phone_number=parameters.get_string(ProtocolField.MOBILE.field_name),
        address=Address(
            street=parameters.get_string(ProtocolField.STREET.field_name),
            house_number=parameters.get_int(ProtocolField.HOUSE_NUMBER.field_name),
            house_number_suffix=parameters.get_string(
                ProtocolField.HOUSE_NUMBER_SUFFIX.field_name
            ),
            postal_code=parameters.get_string(ProtocolField.ZIP_CODE.field_name),
            city=parameters.get_string(ProtocolField.CITY.field_name),
        ),
        subscription_ids=parameters.get_string_collection(
            ProtocolField.SUBSCRIPTION_IDS.field_name
        ),
        invoice_ids=parameters.get_string_collection(ProtocolField.INVOICE_IDS.field_name),
    )
