"""Rotas de email transacional (OTP)."""
