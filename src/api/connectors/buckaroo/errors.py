"""Erros do gateway Buckaroo (sem dados sensíveis).

Taxonomia:
- GatewayConfigurationError: settings ausentes/ inválidas (fatal no startup)
- GatewayTransportError: status HTTP não-2xx, timeout, body inválido
- GatewayProtocolError: resposta fora do formato esperado (parâmetros)
- GatewayBusinessError: status do provider indica falha em operação de escrita

Ausência de devedor ("not found") NÃO é erro: o gateway retorna None.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base para qualquer erro levantado pelo gateway de assinaturas."""


class GatewayConfigurationError(GatewayError):
    """Configuração obrigatória ausente ou inválida."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors) or "invalid_configuration")
        self.errors = list(errors)


class BuckarooGatewayError(GatewayError):
    """Base para falhas na interação com a API Buckaroo."""


class GatewayTransportError(BuckarooGatewayError):
    """Falha de transporte HTTP ou de desserialização do envelope."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class GatewayProtocolError(BuckarooGatewayError):
    """Resposta não respeita o formato do protocolo de parâmetros."""


class ParameterError(GatewayProtocolError):
    """Erro ao acessar um parâmetro nomeado da resposta."""

    def __init__(self, message: str, parameter_name: str, accessor: str) -> None:
        super().__init__(message)
        self.parameter_name = parameter_name
        self.accessor = accessor


class ParameterLookupError(ParameterError):
    """Nenhum ou mais de um parâmetro com o mesmo nome."""

    def __init__(self, parameter_name: str, accessor: str, match_count: int) -> None:
        super().__init__(
            f"{accessor}: failed to locate the single item for {parameter_name} "
            f"({match_count} matches)",
            parameter_name=parameter_name,
            accessor=accessor,
        )
        self.match_count = match_count


class ParameterParseError(ParameterError):
    """Valor do parâmetro não pode ser convertido para o tipo alvo."""

    def __init__(
        self,
        parameter_name: str,
        accessor: str,
        target_type: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"{accessor}: failed to parse {parameter_name} as {target_type}",
            parameter_name=parameter_name,
            accessor=accessor,
        )
        self.target_type = target_type


class ParameterOverflowError(ParameterParseError):
    """Valor numérico fora dos limites do tipo alvo."""

    def __init__(self, parameter_name: str, accessor: str, target_type: str) -> None:
        super().__init__(
            parameter_name,
            accessor,
            target_type,
            message=(
                f"{accessor}: {parameter_name} is bigger/smaller than "
                f"{target_type} max/min values"
            ),
        )


class GatewayBusinessError(BuckarooGatewayError):
    """Status do provider indica falha de negócio.

    A mensagem é exatamente a descrição de status retornada pela Buckaroo.
    """

    def __init__(self, status_description: str) -> None:
        super().__init__(status_description)
        self.status_description = status_description
