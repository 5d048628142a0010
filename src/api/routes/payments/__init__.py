"""Rotas de pagamento (Snap, webhook, finish, status)."""
