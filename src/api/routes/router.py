"""Agregador de rotas — registra todos os routers por integração.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.accounts.router import router as accounts_router
from api.routes.email.router import router as email_router
from api.routes.health.router import router as health_router
from api.routes.payments.router import router as payments_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Todas as rotas ficam na raiz (contrato já usado pelo frontend).
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(email_router, tags=["email"])
    api_router.include_router(accounts_router, tags=["accounts"])
    api_router.include_router(payments_router, tags=["payments"])

    return api_router
