"""Normalizers por provider — conversão de respostas externas para modelos internos.

Estrutura:
- buckaroo/: parâmetros achatados (Name/GroupType/GroupID/Value) -> domínio
"""

from .buckaroo import ParameterList, normalize_debtor

__all__ = [
    "ParameterList",
    "normalize_debtor",
]
