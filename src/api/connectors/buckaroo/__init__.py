"""Conector Buckaroo - adapter de borda para a API JSON de pagamentos.

Único ponto de IO com o provider de assinaturas.
Responsabilidades:
- Assinatura HMAC por request (timestamp + nonce novos)
- Transporte HTTP (transaction / datarequest)
- Envelopes wire e vocabulário de parâmetros
- Classificação de status e taxonomia de erros
- Gateway com as operações de negócio (importar de .gateway)
"""

from .errors import (
    BuckarooGatewayError,
    GatewayBusinessError,
    GatewayConfigurationError,
    GatewayError,
    GatewayProtocolError,
    GatewayTransportError,
    ParameterError,
    ParameterLookupError,
    ParameterOverflowError,
    ParameterParseError,
)
from .http_client import BuckarooHttpClient, HttpClientConfig
from .signature import BuckarooHmacAuth, HmacSigner
from .status import StatusOutcome, classify_status

__all__ = [
    "BuckarooGatewayError",
    "BuckarooHmacAuth",
    "BuckarooHttpClient",
    "GatewayBusinessError",
    "GatewayConfigurationError",
    "GatewayError",
    "GatewayProtocolError",
    "GatewayTransportError",
    "HmacSigner",
    "HttpClientConfig",
    "ParameterError",
    "ParameterLookupError",
    "ParameterOverflowError",
    "ParameterParseError",
    "StatusOutcome",
    "classify_status",
]
