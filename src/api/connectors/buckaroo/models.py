"""Modelos de wire (envelopes JSON) da API Buckaroo.

Os nomes de campo seguem o JSON do provider via alias (PascalCase);
atributos Python em snake_case. Serializar sempre com
`model_dump(by_alias=True, exclude_none=True, mode="json")`.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

_WIRE_CONFIG = ConfigDict(
    populate_by_name=True,
    extra="ignore",
    coerce_numbers_to_str=True,
)


class WireParameter(BaseModel):
    """Unidade do protocolo achatado: {Name, GroupType, GroupID, Value}."""

    model_config = _WIRE_CONFIG

    name: str = Field(alias="Name")
    group_type: str | None = Field(default="", alias="GroupType")
    group_id: str | None = Field(default="", alias="GroupID")
    value: str | None = Field(default=None, alias="Value")


class CustomParameter(BaseModel):
    """Parâmetro livre do envelope (CustomParameters.List)."""

    model_config = _WIRE_CONFIG

    name: str = Field(alias="Name")
    value: str | None = Field(default=None, alias="Value")


class CustomParameterCollection(BaseModel):
    model_config = _WIRE_CONFIG

    items: list[CustomParameter] = Field(default_factory=list, alias="List")


class ServiceRequest(BaseModel):
    """Entrada de ServiceList em requests."""

    model_config = _WIRE_CONFIG

    name: str = Field(alias="Name")
    action: str = Field(alias="Action")
    parameters: list[WireParameter] = Field(default_factory=list, alias="Parameters")


class ServiceListRequest(BaseModel):
    model_config = _WIRE_CONFIG

    service_list: list[ServiceRequest] = Field(default_factory=list, alias="ServiceList")


class DataRequest(BaseModel):
    """Envelope de data request (consultas somente leitura)."""

    model_config = _WIRE_CONFIG

    services: ServiceListRequest = Field(alias="Services")


class TransactionRequest(BaseModel):
    """Envelope de transação (operações que alteram estado)."""

    model_config = _WIRE_CONFIG

    currency: str = Field(alias="Currency")
    start_recurrent: str = Field(alias="StartRecurrent")
    continue_on_incomplete: str = Field(alias="ContinueOnIncomplete")
    amount_debit: Decimal = Field(alias="AmountDebit")
    amount_credit: Decimal = Field(default=Decimal("0"), alias="AmountCredit")
    invoice: str = Field(default="", alias="Invoice")
    description: str | None = Field(default=None, alias="Description")
    client_ip: str | None = Field(default=None, alias="ClientIP")
    return_url: str | None = Field(default=None, alias="ReturnURL")
    return_url_cancel: str | None = Field(default=None, alias="ReturnURLCancel")
    return_url_error: str | None = Field(default=None, alias="ReturnURLError")
    return_url_reject: str | None = Field(default=None, alias="ReturnURLReject")
    push_url: str | None = Field(default=None, alias="PushURL")
    push_url_failure: str | None = Field(default=None, alias="PushURLFailure")
    services: ServiceListRequest = Field(alias="Services")
    custom_parameters: CustomParameterCollection | None = Field(
        default=None, alias="CustomParameters"
    )
    additional_parameters: list[WireParameter] | None = Field(
        default=None, alias="AdditionalParameters"
    )

    @field_serializer("amount_debit", "amount_credit", when_used="json")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)


class StatusCode(BaseModel):
    model_config = _WIRE_CONFIG

    code: int | str | None = Field(default=None, alias="Code")
    description: str | None = Field(default="", alias="Description")


class ResponseStatus(BaseModel):
    """Status de negócio do envelope (fonte de verdade, não o HTTP status)."""

    model_config = _WIRE_CONFIG

    code: StatusCode = Field(default_factory=StatusCode, alias="Code")
    sub_code: StatusCode | None = Field(default=None, alias="SubCode")
    date_time: str | None = Field(default=None, alias="DateTime")

    @property
    def description(self) -> str:
        """Descrição do Code; vazia quando ausente."""
        return self.code.description or ""

    @property
    def sub_description(self) -> str:
        """Descrição do SubCode; vazia quando o provider envia null."""
        if self.sub_code is None:
            return ""
        return self.sub_code.description or ""


class RequiredAction(BaseModel):
    model_config = _WIRE_CONFIG

    redirect_url: str | None = Field(default=None, alias="RedirectURL")
    name: str | None = Field(default=None, alias="Name")
    requested_information: Any = Field(default=None, alias="RequestedInformation")


class ResponseService(BaseModel):
    """Serviço na resposta; Action pode vir nulo ou como objeto."""

    model_config = _WIRE_CONFIG

    name: str | None = Field(default=None, alias="Name")
    action: Any = Field(default=None, alias="Action")
    parameters: list[WireParameter] | None = Field(default=None, alias="Parameters")


class BuckarooResponse(BaseModel):
    """Campos comuns a todos os envelopes de resposta."""

    model_config = _WIRE_CONFIG

    key: str | None = Field(default=None, alias="Key")
    status: ResponseStatus = Field(alias="Status")
    required_action: RequiredAction | None = Field(default=None, alias="RequiredAction")
    services: list[ResponseService] | None = Field(default=None, alias="Services")
    request_errors: Any = Field(default=None, alias="RequestErrors")
    service_code: str | None = Field(default=None, alias="ServiceCode")
    is_test: bool | None = Field(default=None, alias="IsTest")


class DebtorInfoResponse(BuckarooResponse):
    """Resposta de CreditManagement3/DebtorInfo."""


class CombinedSubscriptionResponse(BuckarooResponse):
    """Resposta de Subscriptions/CreateCombinedSubscription."""

    invoice: str | None = Field(default=None, alias="Invoice")
    currency: str | None = Field(default=None, alias="Currency")
    amount_debit: Decimal | None = Field(default=None, alias="AmountDebit")
    transaction_type: str | None = Field(default=None, alias="TransactionType")
    payment_key: str | None = Field(default=None, alias="PaymentKey")
    start_recurrent: bool | None = Field(default=None, alias="StartRecurrent")
    recurring: bool | None = Field(default=None, alias="Recurring")
