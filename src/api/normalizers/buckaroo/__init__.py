"""Normalizer Buckaroo — parâmetros achatados -> valores tipados e Debtor."""

from .debtor import normalize_debtor
from .parameters import ParameterList

__all__ = [
    "ParameterList",
    "normalize_debtor",
]
