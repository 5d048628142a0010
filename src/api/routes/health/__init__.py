"""Rotas de informação e health checks."""
