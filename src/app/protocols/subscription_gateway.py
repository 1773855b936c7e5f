"""Protocolos do gateway de assinaturas.

O app depende destes contratos; a implementação concreta (Buckaroo) fica
em api/connectors e é conectada no bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from app.domain.billing import (
        CreateCombinedSubscriptionRequest,
        Debtor,
        GetDebtorRequest,
    )

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class SubscriptionGatewayProtocol(Protocol):
    """Operações de negócio expostas pelo provider de assinaturas."""

    async def get_debtor(self, request: GetDebtorRequest) -> Debtor | None: ...

    async def create_combined_subscription(
        self,
        request: CreateCombinedSubscriptionRequest,
    ) -> str: ...


class PspClientProtocol(Protocol):
    """Transporte assinado para o provider (PSP)."""

    async def post_transaction(
        self,
        request: BaseModel,
        response_type: type[ResponseT],
    ) -> ResponseT: ...

    async def post_data_request(
        self,
        request: BaseModel,
        response_type: type[ResponseT],
    ) -> ResponseT: ...
