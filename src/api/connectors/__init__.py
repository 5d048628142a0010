"""Connectors por provedor — adapters de borda para APIs externas.

Estrutura:
- mailersend/: envio de email transacional
- midtrans/: Snap token e consulta de status

Cada connector implementa um protocolo de app/protocols e é conectado
pelo bootstrap.
"""

__all__: list[str] = []
