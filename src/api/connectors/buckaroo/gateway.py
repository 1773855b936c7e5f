"""Gateway de assinaturas Buckaroo.

Orquestra builders (encode), transporte assinado e normalizers (decode)
para cada operação de negócio, interpretando Status/SubStatus da resposta.

Fluxo por operação:
    request tipado -> payload_builders -> BuckarooHttpClient (HMAC)
    -> envelope de resposta -> classify_status -> Debtor | None | URL | erro
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.buckaroo.buckaroo_logging import log_unexpected_status
from api.connectors.buckaroo.constants import DEFAULT_CULTURE
from api.connectors.buckaroo.errors import GatewayBusinessError, GatewayProtocolError
from api.connectors.buckaroo.models import CombinedSubscriptionResponse, DebtorInfoResponse
from api.connectors.buckaroo.status import StatusOutcome, classify_status
from api.normalizers.buckaroo import normalize_debtor
from api.payload_builders.buckaroo import (
    build_combined_subscription_request,
    build_debtor_info_request,
)
from app.observability import log_scope

if TYPE_CHECKING:
    from app.domain.billing import (
        CreateCombinedSubscriptionRequest,
        Debtor,
        GetDebtorRequest,
    )
    from app.protocols.subscription_gateway import PspClientProtocol

logger: logging.Logger = logging.getLogger(__name__)


class BuckarooGateway:
    """Implementação Buckaroo de SubscriptionGatewayProtocol.

    Não guarda estado entre chamadas; cada operação gera exatamente um
    request HTTP e nenhum retry é feito aqui.
    """

    def __init__(
        self,
        client: PspClientProtocol,
        configuration_code: str = "",
        culture: str = DEFAULT_CULTURE,
    ) -> None:
        """Inicializa o gateway.

        Args:
            client: Transporte assinado (BuckarooHttpClient ou fake)
            configuration_code: Template de produto padrão no provider
            culture: Cultura enviada nos dados do devedor
        """
        self._client = client
        self._configuration_code = configuration_code
        self._culture = culture

    async def get_debtor(self, request: GetDebtorRequest) -> Debtor | None:
        """Consulta um devedor pelo id.

        Returns:
            Debtor quando encontrado; None quando o provider informa que o
            devedor não existe ou retorna qualquer outro status.

        Raises:
            GatewayTransportError: Falha HTTP/desserialização
            GatewayProtocolError: Parâmetros da resposta inválidos
        """
        debtor_id = str(request.debtor_id)
        with log_scope(operation="get_debtor", debtor_id=debtor_id):
            payload = build_debtor_info_request(request)
            try:
                response = await self._client.post_data_request(payload, DebtorInfoResponse)
                outcome = classify_status(response.status)

                if outcome is StatusOutcome.SUCCESS:
                    debtor = normalize_debtor(response)
                    logger.info("buckaroo_debtor_found", extra={"debtor_id": debtor_id})
                    return debtor
            except Exception as exc:
                logger.error(
                    "buckaroo_get_debtor_failed",
                    extra={"debtor_id": debtor_id, "error_type": type(exc).__name__},
                    exc_info=True,
                )
                raise

            if outcome is StatusOutcome.DEBTOR_NOT_FOUND:
                logger.info("buckaroo_debtor_not_found", extra={"debtor_id": debtor_id})
                return None

            log_unexpected_status("get_debtor", response.status)
            return None

    async def create_combined_subscription(
        self,
        request: CreateCombinedSubscriptionRequest,
    ) -> str:
        """Registra devedor e assinatura numa única transação.

        Returns:
            RedirectURL onde o usuário conclui a autorização de pagamento.

        Raises:
            GatewayBusinessError: Status diferente de "Pending input"
            GatewayProtocolError: "Pending input" sem RedirectURL
            GatewayTransportError: Falha HTTP/desserialização
        """
        with log_scope(operation="create_combined_subscription"):
            payload = build_combined_subscription_request(
                request,
                default_configuration_code=self._configuration_code,
                culture=self._culture,
            )
            try:
                response = await self._client.post_transaction(
                    payload, CombinedSubscriptionResponse
                )
                if classify_status(response.status) is StatusOutcome.PENDING_INPUT:
                    action = response.required_action
                    redirect_url = action.redirect_url if action is not None else None
                    if not redirect_url:
                        raise GatewayProtocolError(
                            "Pending input response without RequiredAction.RedirectURL"
                        )
                    logger.info(
                        "buckaroo_subscription_pending_input",
                        extra={"transaction_key": response.key},
                    )
                    return redirect_url

                log_unexpected_status("create_combined_subscription", response.status)
                raise GatewayBusinessError(response.status.description)
            except Exception as exc:
                logger.error(
                    "buckaroo_gateway_error",
                    extra={
                        "source": "SubscriptionGateway",
                        "error_type": type(exc).__name__,
                    },
                    exc_info=True,
                )
                raise
