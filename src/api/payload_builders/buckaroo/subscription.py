"""Builder da transação CreateCombinedSubscription."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.buckaroo.constants import (
    AMOUNT_CREDIT,
    AMOUNT_DEBIT,
    CONTINUE_ON_INCOMPLETE,
    CURRENCY,
    DEFAULT_CULTURE,
    GENDER_PARAMETER,
    GENDER_UNSPECIFIED,
    INCLUDE_TRANSACTION,
    START_RECURRENT,
    TRANSACTION_VAT_PERCENTAGE,
    ProtocolField,
    ServiceAction,
    ServiceName,
)
from api.connectors.buckaroo.models import (
    CustomParameter,
    CustomParameterCollection,
    TransactionRequest,
    WireParameter,
)
from api.payload_builders.buckaroo.base import (
    build_parameter,
    build_service_list,
    format_date,
    format_decimal,
)
from api.payload_builders.buckaroo.debtor import build_debtor_parameters

if TYPE_CHECKING:
    from app.domain.billing import Charge, CreateCombinedSubscriptionRequest


def build_charge_parameters(charge: Charge) -> list[WireParameter]:
    """Parâmetros de rate plan / rate plan charge (GroupID "subscription")."""
    return [
        build_parameter(ProtocolField.RATE_PLAN_CODE, charge.rate_plan_code),
        build_parameter(ProtocolField.RATE_PLAN_CHARGE_CODE, charge.rate_plan_charge_code),
        build_parameter(ProtocolField.PRICE_PER_UNIT, format_decimal(charge.price_per_unit)),
        build_parameter(ProtocolField.VAT_PERCENTAGE, format_decimal(charge.vat_percentage)),
        build_parameter(ProtocolField.TRANSACTION_VAT_PERCENTAGE, TRANSACTION_VAT_PERCENTAGE),
        build_parameter(ProtocolField.START_DATE, format_date(charge.start_date)),
        build_parameter(ProtocolField.END_DATE, format_date(charge.end_date)),
    ]


def build_combined_subscription_request(
    request: CreateCombinedSubscriptionRequest,
    default_configuration_code: str = "",
    culture: str = DEFAULT_CULTURE,
) -> TransactionRequest:
    """Monta a transação que registra devedor e assinatura de uma vez.

    Args:
        request: Devedor + assinatura
        default_configuration_code: Usado quando a assinatura não traz código
        culture: Cultura do devedor (parâmetro Person/Culture)

    Returns:
        Envelope pronto para post_transaction (puro e determinístico)
    """
    subscription = request.subscription
    configuration_code = subscription.configuration_code or default_configuration_code

    parameters = [
        build_parameter(ProtocolField.INCLUDE_TRANSACTION, INCLUDE_TRANSACTION),
        build_parameter(ProtocolField.CONFIGURATION_CODE, configuration_code),
        *build_debtor_parameters(request.debtor, culture),
        *build_charge_parameters(subscription.charge),
    ]

    return TransactionRequest(
        currency=CURRENCY,
        start_recurrent=START_RECURRENT,
        continue_on_incomplete=CONTINUE_ON_INCOMPLETE,
        amount_debit=AMOUNT_DEBIT,
        amount_credit=AMOUNT_CREDIT,
        invoice=subscription.invoice_description or "",
        description=subscription.name,
        services=build_service_list(
            ServiceName.SUBSCRIPTIONS,
            ServiceAction.CREATE_COMBINED_SUBSCRIPTION,
            parameters,
        ),
        custom_parameters=CustomParameterCollection(
            items=[CustomParameter(name=GENDER_PARAMETER, value=GENDER_UNSPECIFIED)]
        ),
    )
