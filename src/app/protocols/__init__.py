"""Protocolos e contratos do core da aplicação."""

from .subscription_gateway import PspClientProtocol, SubscriptionGatewayProtocol

__all__ = [
    "PspClientProtocol",
    "SubscriptionGatewayProtocol",
]
