"""Modelos de dominio para devedores e assinaturas recorrentes.

Contrato interno estável, desacoplado do formato wire do provider de
pagamentos. Instâncias são criadas a cada chamada e pertencem ao chamador.
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal  # noqa: TC003
from uuid import UUID  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """Endereço postal (valor embutido em Debtor e Subscription)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    street: str
    house_number: int
    house_number_suffix: str = ""
    postal_code: str
    city: str


class Debtor(BaseModel):
    """Devedor cadastrado no provider."""

    model_config = ConfigDict(extra="ignore")

    id: UUID
    first_name: str
    last_name: str
    email_address: str
    phone_number: str
    address: Address
    subscription_ids: list[str] | None = None
    invoice_ids: list[str] | None = None


class Charge(BaseModel):
    """Termos de cobrança de uma assinatura (rate plan)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    rate_plan_code: str
    rate_plan_charge_code: str
    price_per_unit: Decimal
    vat_percentage: Decimal
    start_date: date
    end_date: date | None = None


class Subscription(BaseModel):
    """Assinatura a ser criada (somente entrada)."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str | None = None
    invoice_description: str | None = None
    charge: Charge
    configuration_code: str = Field(
        default="",
        description="Template do produto no provider; vazio usa o configurado.",
    )
    invoice_address: Address | None = None


class GetDebtorRequest(BaseModel):
    """Consulta de devedor por identificador."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    debtor_id: UUID


class CreateCombinedSubscriptionRequest(BaseModel):
    """Registro de devedor + criação de assinatura em uma única transação."""

    model_config = ConfigDict(extra="ignore")

    debtor: Debtor
    subscription: Subscription


__all__ = [
    "Address",
    "Charge",
    "CreateCombinedSubscriptionRequest",
    "Debtor",
    "GetDebtorRequest",
    "Subscription",
]
