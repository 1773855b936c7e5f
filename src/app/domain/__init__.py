"""Domínio — entidades de cobrança recorrente."""

from .billing import (
    Address,
    Charge,
    CreateCombinedSubscriptionRequest,
    Debtor,
    GetDebtorRequest,
    Subscription,
)

__all__ = [
    "Address",
    "Charge",
    "CreateCombinedSubscriptionRequest",
    "Debtor",
    "GetDebtorRequest",
    "Subscription",
]
