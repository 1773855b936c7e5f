"""API — camada de borda e adapters de providers.

Responsabilidades:
- Assinar e enviar requests para providers externos
- Construir payloads no formato wire
- Normalizar respostas para modelos internos
- Classificar falhas (transitória, permanente, negócio)

Subpastas:
- connectors/: adapters HTTP por provider
- normalizers/: conversão de respostas externas -> modelos internos
- payload_builders/: construção de payloads para APIs externas

NÃO PODE conter: regras de negócio do app, wiring de dependências.
"""
