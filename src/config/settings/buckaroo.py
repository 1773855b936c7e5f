"""Settings do provider de pagamentos Buckaroo.

Credenciais e endpoints do gateway de assinaturas. Todas as chaves são
obrigatórias; a validação acontece no startup (app/bootstrap).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

BUCKAROO_DEFAULT_CULTURE: str = "nl-NL"
BUCKAROO_DEFAULT_CHANNEL: str = "Web"
BUCKAROO_TRANSACTION_SLUG: str = "json/transaction"
BUCKAROO_DATA_REQUEST_SLUG: str = "json/datarequest"


@dataclass(frozen=True)
class BuckarooSettings:
    """Configurações da integração Buckaroo.

    Attributes:
        website_key: Chave do website (identifica o merchant)
        private_key: Secret compartilhado para HMAC (nunca logar)
        base_url: URL base da API JSON (ex: https://testcheckout.buckaroo.nl/)
        configuration_code: Template de produto/assinatura no provider
        culture: Header `culture` e cultura do devedor
        channel: Header `channel`
        request_timeout_seconds: Timeout por request HTTP
    """

    website_key: str = ""
    private_key: str = field(default="", repr=False)
    base_url: str = ""
    configuration_code: str = ""

    culture: str = BUCKAROO_DEFAULT_CULTURE
    channel: str = BUCKAROO_DEFAULT_CHANNEL

    request_timeout_seconds: float = 30.0

    def _endpoint(self, slug: str) -> str:
        return f"{self.base_url.rstrip('/')}/{slug}"

    @property
    def transaction_endpoint(self) -> str:
        """URL de transações (operações que alteram estado)."""
        return self._endpoint(BUCKAROO_TRANSACTION_SLUG)

    @property
    def data_request_endpoint(self) -> str:
        """URL de data requests (consultas)."""
        return self._endpoint(BUCKAROO_DATA_REQUEST_SLUG)

    def validate(self) -> list[str]:
        """Valida configurações obrigatórias.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.website_key:
            errors.append("BUCKAROO_WEBSITE_KEY não configurado")

        if not self.private_key:
            errors.append("BUCKAROO_PRIVATE_KEY não configurado")

        if not self.base_url:
            errors.append("BUCKAROO_BASE_URL não configurado")
        elif not self.base_url.startswith(("https://", "http://")):
            errors.append("BUCKAROO_BASE_URL deve ser uma URL http(s)")

        if not self.configuration_code:
            errors.append("BUCKAROO_CONFIGURATION_CODE não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("BUCKAROO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> BuckarooSettings:
    """Carrega BuckarooSettings a partir de variáveis de ambiente."""
    return BuckarooSettings(
        website_key=os.getenv("BUCKAROO_WEBSITE_KEY", ""),
        private_key=os.getenv("BUCKAROO_PRIVATE_KEY", ""),
        base_url=os.getenv("BUCKAROO_BASE_URL", ""),
        configuration_code=os.getenv("BUCKAROO_CONFIGURATION_CODE", ""),
        culture=os.getenv("BUCKAROO_CULTURE", BUCKAROO_DEFAULT_CULTURE),
        channel=os.getenv("BUCKAROO_CHANNEL", BUCKAROO_DEFAULT_CHANNEL),
        request_timeout_seconds=float(
            os.getenv("BUCKAROO_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_buckaroo_settings() -> BuckarooSettings:
    """Retorna instância cacheada de BuckarooSettings (imutável após startup)."""
    return _load_from_env()
