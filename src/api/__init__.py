"""API — camada de borda e adapters de provedores.

Responsabilidades:
- Receber requests do frontend e notificações do gateway
- Checar campos obrigatórios e formato dos corpos
- Construir payloads para APIs externas
- Traduzir resultados dos use cases no envelope JSON

Subpastas:
- connectors/: clients HTTP por provedor (MailerSend, Midtrans)
- payload_builders/: construção de payloads para APIs externas
- validators/: presença de campos obrigatórios
- routes/: endpoints HTTP por fluxo (email, contas, pagamentos, health)

NÃO PODE conter: regras de status de pagamento, acesso direto ao Firestore.
"""
