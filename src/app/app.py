"""Entrypoint do payment backend.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import build_service_container, initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from app.bootstrap import ServiceContainer

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings e monta o ServiceContainer (uma vez), a menos
    que um container já tenha sido injetado em create_app().
    """
    logger.info("app_starting")
    if getattr(app.state, "container", None) is None:
        validate_runtime_settings()
        app.state.container = build_service_container()

    runtime = app.state.container.runtime
    logger.info(
        "app_ready",
        extra={
            "firebase_enabled": runtime.firebase_enabled,
            "email_config_ok": runtime.email_config_ok,
            "midtrans_config_ok": runtime.midtrans_config_ok,
            "environment": runtime.environment,
        },
    )

    yield

    logger.info("app_shutting_down")


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Define correlation_id por request e loga método/path/status/latência."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    started_at = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        logger.info(
            "http_request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return response
    finally:
        reset_correlation_id(token)


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        container: Container pronto (testes); sem ele, o lifespan monta
            um a partir das variáveis de ambiente.
    """
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Payment Backend",
        description="Proxy entre o frontend, MailerSend, Midtrans e Firebase",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    fastapi_app.state.container = container

    # Padrão permissivo ("*" + credenciais); restringir via CORS_ALLOW_ORIGINS
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Authorization",
            "ngrok-skip-browser-warning",
            "X-Requested-With",
            "User-Agent",
            CORRELATION_ID_HEADER,
        ],
    )
    fastapi_app.middleware("http")(correlation_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("server_starting", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
