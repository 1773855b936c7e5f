"""Payload builders Buckaroo — requests tipados -> envelopes de parâmetros."""

from .base import build_parameter, format_date, format_decimal
from .debtor import build_debtor_info_request, build_debtor_parameters
from .subscription import build_charge_parameters, build_combined_subscription_request

__all__ = [
    "build_charge_parameters",
    "build_combined_subscription_request",
    "build_debtor_info_request",
    "build_debtor_parameters",
    "build_parameter",
    "format_date",
    "format_decimal",
]
