"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (email, conta, pagamentos, health)
- Validação inicial de request (corpo JSON, campos obrigatórios)
- Delegação para use cases via ServiceContainer
- Envelope JSON padronizado (`success` + dados ou `message`)

Agregação:
- router.py: registra todos os routers no app principal
- errors.py: exception handlers globais
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
