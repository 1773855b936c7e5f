"""Connectors por provider — adapters de borda para APIs externas.

Estrutura:
- buckaroo/: API JSON de pagamentos e assinaturas (HMAC)

Cada provider tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
