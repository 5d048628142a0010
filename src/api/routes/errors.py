"""Exception handlers globais no formato do envelope JSON.

- Rota inexistente (404/405): lista de endpoints disponíveis
- Erro de validação do FastAPI: 400
- Qualquer exceção não tratada: 500 genérico, sem detalhes internos

O ServerErrorMiddleware do Starlette só escreve a resposta 500 se a
resposta original ainda não começou a ser enviada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.endpoints import AVAILABLE_ENDPOINTS
from api.routes.responses import error_response

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

_ROUTE_MISS_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in _ROUTE_MISS_STATUSES:
        logger.info(
            "route_not_found",
            extra={"method": request.method, "path": request.url.path},
        )
        return error_response(
            status.HTTP_404_NOT_FOUND,
            "Route not found",
            path=request.url.path,
            method=request.method,
            available_endpoints=list(AVAILABLE_ENDPOINTS),
        )
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        errors=[{"loc": list(error.get("loc", ())), "msg": error.get("msg")} for error in exc.errors()],
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
