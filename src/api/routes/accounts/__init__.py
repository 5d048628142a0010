"""Rotas de conta (provedor de identidade)."""
