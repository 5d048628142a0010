"""App — coração do sistema: casos de uso, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (container, clients, inicialização)
- use_cases/: casos de uso (inputs/outputs, sem dependência de api)
- domain/: modelos e regras puras (status de pagamento, contratos)
- infra/: implementações concretas de IO (Firestore, Identity, HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
