"""Agregador de settings do serviço de assinaturas.

Re-exporta as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider settings
from config.settings.buckaroo import (
    BUCKAROO_DATA_REQUEST_SLUG,
    BUCKAROO_DEFAULT_CHANNEL,
    BUCKAROO_DEFAULT_CULTURE,
    BUCKAROO_TRANSACTION_SLUG,
    BuckarooSettings,
    get_buckaroo_settings,
)

__all__ = [
    # Constants
    "BUCKAROO_DATA_REQUEST_SLUG",
    "BUCKAROO_DEFAULT_CHANNEL",
    "BUCKAROO_DEFAULT_CULTURE",
    "BUCKAROO_TRANSACTION_SLUG",
    # Base
    "BaseSettings",
    # Providers
    "BuckarooSettings",
    "Environment",
    "get_base_settings",
    "get_buckaroo_settings",
]
