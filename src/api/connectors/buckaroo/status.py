"""Classificação do status de negócio retornado pela Buckaroo.

A API só expõe o resultado em descrições legíveis; o contrato é casar
substrings. Todas as substrings ficam aqui.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.connectors.buckaroo.models import ResponseStatus

SUCCESS_MARKER = "Success"
PENDING_INPUT_MARKER = "Pending input"
DEBTOR_NOT_FOUND_MARKER = "The debtor is not found"


class StatusOutcome(StrEnum):
    """Resultado de negócio de um envelope de resposta."""

    SUCCESS = "success"
    PENDING_INPUT = "pending_input"
    DEBTOR_NOT_FOUND = "debtor_not_found"
    FAILURE = "failure"


def classify_status(status: ResponseStatus) -> StatusOutcome:
    """Mapeia Status/SubStatus para StatusOutcome.

    Ordem: Code contém "Success" > Code contém "Pending input" >
    SubCode contém "The debtor is not found" > falha. SubCode
    nulo conta como descrição vazia.
    """
    description = status.description
    if SUCCESS_MARKER in description:
        return StatusOutcome.SUCCESS
    if PENDING_INPUT_MARKER in description:
        return StatusOutcome.PENDING_INPUT
    if DEBTOR_NOT_FOUND_MARKER in status.sub_description:
        return StatusOutcome.DEBTOR_NOT_FOUND
    return StatusOutcome.FAILURE
