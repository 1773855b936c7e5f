"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging e conecta implementações concretas
(api/connectors) aos protocolos usados pelo app.

Uso:
    from app.bootstrap import create_buckaroo_gateway, initialize_app

    initialize_app()
    gateway = create_buckaroo_gateway()
    debtor = await gateway.get_debtor(GetDebtorRequest(debtor_id=...))
"""

from __future__ import annotations

import logging

from app.bootstrap.buckaroo_factory import create_buckaroo_gateway, ensure_valid_settings
from app.observability import get_correlation_id, get_log_scope
from config.logging import configure_logging
from config.settings import get_base_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado com correlation_id e escopo.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        scope_getter=get_log_scope,
    )
    logger.info("app_initialized", extra={"environment": base.environment})


__all__ = [
    "create_buckaroo_gateway",
    "ensure_valid_settings",
    "initialize_app",
]
