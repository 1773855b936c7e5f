"""Cliente HTTP (transporte) para a API JSON da Buckaroo.

Responsabilidades:
- Serializar envelopes pydantic no formato wire (aliases PascalCase)
- Assinar cada request via BuckarooHmacAuth
- Exigir HTTP 2xx e desserializar o envelope de resposta
- Classificar falhas (transitória vs permanente) sem retry interno

Retry, circuit breaker e backoff ficam com o chamador.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from api.connectors.buckaroo.buckaroo_logging import log_success, log_transport_error
from api.connectors.buckaroo.errors import GatewayTransportError
from app.observability import record_latency

if TYPE_CHECKING:
    from api.connectors.buckaroo.signature import BuckarooHmacAuth
    from config.settings import BuckarooSettings

logger: logging.Logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

_RETRYABLE_STATUS = frozenset({408, 429})


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def is_retryable_status(status_code: int) -> bool:
    """429/408 e 5xx são transitórios; demais 4xx são permanentes."""
    return status_code in _RETRYABLE_STATUS or status_code >= 500


class BuckarooHttpClient:
    """Transporte assinado para os endpoints transaction e datarequest."""

    def __init__(
        self,
        settings: BuckarooSettings,
        auth: BuckarooHmacAuth,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o transporte.

        Args:
            settings: Settings Buckaroo (base URL, culture, channel)
            auth: Auth httpx que assina os requests
            config: Timeout e headers adicionais
            client: AsyncClient compartilhado (pool keep-alive). Se None,
                um client é aberto e fechado a cada chamada.
        """
        self._settings = settings
        self._auth = auth
        self._config = config or HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds
        )
        self._client = client

    async def post_transaction(
        self,
        request: BaseModel,
        response_type: type[ResponseT],
    ) -> ResponseT:
        """POST em json/transaction (operações que alteram estado)."""
        return await self._post(request, response_type, self._settings.transaction_endpoint)

    async def post_data_request(
        self,
        request: BaseModel,
        response_type: type[ResponseT],
    ) -> ResponseT:
        """POST em json/datarequest (consultas)."""
        return await self._post(request, response_type, self._settings.data_request_endpoint)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "culture": self._settings.culture,
            "channel": self._settings.channel,
            **self._config.default_headers,
        }

    async def _post(
        self,
        request: BaseModel,
        response_type: type[ResponseT],
        endpoint: str,
    ) -> ResponseT:
        operation = type(request).__name__
        payload = request.model_dump(by_alias=True, exclude_none=True, mode="json")
        started = time.perf_counter()
        try:
            response = await self._send(endpoint, payload)
        except httpx.HTTPError as exc:
            log_transport_error(exc, operation, endpoint)
            is_retryable = isinstance(exc, httpx.TimeoutException | httpx.NetworkError)
            raise GatewayTransportError(
                "http_connection_error", is_retryable=is_retryable
            ) from exc
        finally:
            record_latency(
                "buckaroo_http_client",
                operation,
                (time.perf_counter() - started) * 1000,
            )

        if not response.is_success:
            error = GatewayTransportError(
                "http_unexpected_status",
                status_code=response.status_code,
                is_retryable=is_retryable_status(response.status_code),
            )
            log_transport_error(error, operation, endpoint, response.status_code)
            raise error

        try:
            parsed = response_type.model_validate_json(response.content)
        except ValidationError as exc:
            log_transport_error(exc, operation, endpoint, response.status_code)
            raise GatewayTransportError(
                "invalid_response_body", status_code=response.status_code
            ) from exc

        log_success(operation, endpoint, response.status_code)
        return parsed

    async def _send(self, endpoint: str, payload: dict[str, object]) -> httpx.Response:
        headers = self._build_headers()
        if self._client is not None:
            return await self._client.post(
                endpoint,
                json=payload,
                headers=headers,
                auth=self._auth,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.post(
                endpoint,
                json=payload,
                headers=headers,
                auth=self._auth,
                timeout=self._config.timeout_seconds,
            )
