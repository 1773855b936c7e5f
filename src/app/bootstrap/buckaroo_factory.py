"""Factory de wiring do gateway Buckaroo (bootstrap).

Monta signer -> auth httpx -> transporte -> gateway a partir das settings,
validando as credenciais obrigatórias antes de qualquer chamada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.settings import BuckarooSettings, get_buckaroo_settings

if TYPE_CHECKING:
    import httpx

    from api.connectors.buckaroo.gateway import BuckarooGateway

logger = logging.getLogger(__name__)


def ensure_valid_settings(settings: BuckarooSettings) -> BuckarooSettings:
    """Valida settings obrigatórias; falha fatal quando inválidas.

    Raises:
        GatewayConfigurationError: Lista de problemas encontrados
    """
    from api.connectors.buckaroo.errors import GatewayConfigurationError

    errors = settings.validate()
    if errors:
        logger.error(
            "buckaroo_settings_invalid",
            extra={"errors": errors, "settings": "BuckarooSettings"},
        )
        raise GatewayConfigurationError(errors)
    return settings


def create_buckaroo_gateway(
    settings: BuckarooSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> BuckarooGateway:
    """Cria o gateway Buckaroo com dependências injetadas.

    Args:
        settings: BuckarooSettings opcional. Se None, carrega do ambiente.
        http_client: AsyncClient compartilhado (pool). Se None, o
            transporte abre um client por chamada.

    Returns:
        Gateway pronto para uso (implementa SubscriptionGatewayProtocol).
    """
    # Imports locais: wiring de api/ só acontece no bootstrap
    from api.connectors.buckaroo.gateway import BuckarooGateway
    from api.connectors.buckaroo.http_client import BuckarooHttpClient, HttpClientConfig
    from api.connectors.buckaroo.signature import BuckarooHmacAuth, HmacSigner

    buckaroo = ensure_valid_settings(settings or get_buckaroo_settings())
    signer = HmacSigner(website_key=buckaroo.website_key, private_key=buckaroo.private_key)
    transport = BuckarooHttpClient(
        settings=buckaroo,
        auth=BuckarooHmacAuth(signer),
        config=HttpClientConfig(timeout_seconds=buckaroo.request_timeout_seconds),
        client=http_client,
    )
    logger.info("buckaroo_gateway_created", extra={"base_url": buckaroo.base_url})
    return BuckarooGateway(
        client=transport,
        configuration_code=buckaroo.configuration_code,
        culture=buckaroo.culture,
    )
