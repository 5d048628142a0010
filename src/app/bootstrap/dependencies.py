"""Dependências FastAPI — acesso ao container a partir do request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from app.bootstrap.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    """Retorna o ServiceContainer criado no startup."""
    return request.app.state.container
