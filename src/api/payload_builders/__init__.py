"""Payload builders por provider — construção de payloads para APIs externas.

Estrutura:
- buckaroo/: data requests e transações no formato de parâmetros achatados

Builders são puros: sem IO, sem aleatoriedade, determinísticos.
"""

__all__: list[str] = []
