"""App — domínio, contratos e composição.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: entidades e requests de cobrança/assinatura
- protocols/: contratos/interfaces implementados por api/
- observability/: contexto de logs e métricas

Padrão: app define; api adapta; config parametriza.
"""
