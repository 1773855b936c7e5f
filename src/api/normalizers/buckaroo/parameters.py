"""Acessores tipados sobre a lista achatada de parâmetros da Buckaroo.

Cada resposta traz uma lista ordenada de {Name, GroupType, GroupID, Value}
para o primeiro (e único) serviço. Os acessores localizam exatamente um
parâmetro por nome e convertem o valor para o tipo pedido.

Contrato:
- Zero ou múltiplos matches -> ParameterLookupError
- Falha de conversão -> ParameterParseError (ParameterOverflowError p/ limites)
- get_object é a única exceção: JSON inválido levanta erro, qualquer outra
  falha retorna None (mantido por compatibilidade com consumidores).
"""

from __future__ import annotations

import logging
import re
import uuid
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from api.connectors.buckaroo.errors import (
    GatewayProtocolError,
    ParameterLookupError,
    ParameterOverflowError,
    ParameterParseError,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from api.connectors.buckaroo.models import BuckarooResponse, WireParameter

logger = logging.getLogger(__name__)

EnumT = TypeVar("EnumT", bound=Enum)
T = TypeVar("T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
# Limite do tipo decimal do provider (96 bits)
DECIMAL_MAX = Decimal("79228162514264337593543950335")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
# Formato numérico fixo en-US: ponto decimal, vírgula como milhar
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)(?:\.[0-9]*)?"
    r"|[+-]?\.[0-9]+"
)
_BOOL_VALUES = {"true": True, "false": False}


class ParameterList:
    """Lista ordenada de WireParameter com acessores tipados por nome."""

    def __init__(self, parameters: Iterable[WireParameter]) -> None:
        self._parameters: tuple[WireParameter, ...] = tuple(parameters)

    @classmethod
    def from_response(cls, response: BuckarooResponse) -> ParameterList:
        """Extrai os parâmetros do primeiro serviço da resposta.

        Raises:
            GatewayProtocolError: Se não houver serviços ou parâmetros
        """
        services = response.services or []
        if not services or services[0].parameters is None:
            raise GatewayProtocolError("Failed to get response Parameters")
        return cls(services[0].parameters)

    def __iter__(self) -> Iterator[WireParameter]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def _single(self, name: str, accessor: str) -> WireParameter:
        matches = [p for p in self._parameters if p.name == name]
        if len(matches) != 1:
            raise ParameterLookupError(name, accessor, len(matches))
        return matches[0]

    def _read(self, name: str, accessor: str) -> str:
        return self._single(name, accessor).value or ""

    def get_string(self, name: str) -> str:
        """Valor do parâmetro; string vazia quando o valor é nulo."""
        return self._read(name, "get_string")

    def get_bool(self, name: str) -> bool:
        value = self._read(name, "get_bool").strip().lower()
        if value not in _BOOL_VALUES:
            raise ParameterParseError(name, "get_bool", "bool")
        return _BOOL_VALUES[value]

    def get_uuid(self, name: str) -> uuid.UUID:
        value = self._read(name, "get_uuid").strip()
        try:
            return uuid.UUID(value)
        except ValueError as exc:
            raise ParameterParseError(name, "get_uuid", "uuid") from exc

    def get_int(self, name: str) -> int:
        """Inteiro 32 bits com sinal (mesmos limites do provider)."""
        value = self._read(name, "get_int").strip()
        if not _INT_PATTERN.fullmatch(value):
            raise ParameterParseError(name, "get_int", "int")
        number = int(value)
        if not INT32_MIN <= number <= INT32_MAX:
            raise ParameterOverflowError(name, "get_int", "int")
        return number

    def get_decimal(self, name: str) -> Decimal:
        """Decimal em formato en-US (ex: "1,234.56")."""
        value = self._read(name, "get_decimal").strip()
        if not _DECIMAL_PATTERN.fullmatch(value):
            raise ParameterParseError(name, "get_decimal", "decimal")
        try:
            number = Decimal(value.replace(",", ""))
        except InvalidOperation as exc:
            raise ParameterParseError(name, "get_decimal", "decimal") from exc
        if abs(number) > DECIMAL_MAX:
            raise ParameterOverflowError(name, "get_decimal", "decimal")
        return number

    def get_enum(self, name: str, enum_type: type[EnumT]) -> EnumT:
        """Membro do enum pelo nome; na falta, pelo valor."""
        value = self._read(name, "get_enum")
        if value in enum_type.__members__:
            return enum_type[value]
        candidates: list[Any] = [value]
        if _INT_PATTERN.fullmatch(value.strip()):
            candidates.append(int(value))
        for candidate in candidates:
            try:
                return enum_type(candidate)
            except ValueError:
                continue
        raise ParameterParseError(name, "get_enum", enum_type.__name__)

    def get_string_collection(self, name: str) -> list[str]:
        """Lista de valores de uma string `"a","b","c"` (ordem preservada)."""
        value = self._read(name, "get_string_collection").replace('"', "")
        if not value:
            return []
        return value.split(",")

    def get_object(self, name: str, target_type: type[T]) -> T | None:
        """Desserializa o valor (texto JSON) como target_type.

        JSON inválido ou fora do shape levanta ParameterParseError. Qualquer
        outra falha (parâmetro ausente, duplicado ou nulo) retorna None.
        """
        type_name = getattr(target_type, "__name__", str(target_type))
        try:
            raw = self._single(name, "get_object").value
        except ParameterLookupError as exc:
            log_fallback(logger, "buckaroo_get_object", reason=f"lookup:{exc.match_count}")
            return None
        if raw is None:
            log_fallback(logger, "buckaroo_get_object", reason="null_value")
            return None

        try:
            return TypeAdapter(target_type).validate_json(raw)
        except ValidationError as exc:
            raise ParameterParseError(
                name,
                "get_object",
                type_name,
                message=(
                    f"get_object: failed to deserialize {name} to {type_name} "
                    "because of invalid Json"
                ),
            ) from exc
        except Exception as exc:  # noqa: BLE001 - fallback documentado
            log_fallback(logger, "buckaroo_get_object", reason=type(exc).__name__)
            return None
