"""Payload builders por provedor — construção de payloads para APIs externas.

Estrutura:
- email/: MailerSend (email de OTP)
- midtrans/: Snap (transações de checkout)

Builders são funções puras: sem IO e sem credenciais.
"""

__all__: list[str] = []
