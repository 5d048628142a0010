"""Envelope JSON padrão das respostas: sempre com `success`.

Centraliza a tradução de Success/Failure dos use cases em status HTTP.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from api.validators.required_fields import missing_fields_message
from app.use_cases.results import Failure, FailureKind, Success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi import Request

    from app.use_cases.results import UseCaseResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

FAILURE_STATUS: dict[FailureKind, int] = {
    "invalid_input": status.HTTP_400_BAD_REQUEST,
    "rejected": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "not_configured": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "upstream_error": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope(payload: dict[str, Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Serializa o payload (datetimes do Firestore inclusos)."""
    return JSONResponse(content=jsonable_encoder(payload), status_code=status_code)


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return envelope({"success": False, "message": message, **extra}, status_code)


def missing_fields_response(missing: Sequence[str]) -> JSONResponse:
    logger.info("request_missing_fields", extra={"missing_fields": list(missing)})
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        missing_fields_message(missing),
        missing_fields=list(missing),
    )


def invalid_json_response() -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")


def render_result(result: UseCaseResult) -> JSONResponse:
    """Traduz o resultado de um use case no envelope HTTP."""
    if isinstance(result, Success):
        return envelope({"success": result.ok, **result.data})
    return render_failure(result)


def render_failure(failure: Failure) -> JSONResponse:
    payload: dict[str, Any] = {
        "success": False,
        "message": failure.message,
        **failure.details,
    }
    if failure.error is not None:
        payload["error"] = failure.error
    if failure.error_code is not None:
        payload["error_code"] = failure.error_code
    return envelope(payload, FAILURE_STATUS[failure.kind])


async def read_json_object(request: Request) -> dict[str, Any] | None:
    """Lê o corpo como objeto JSON.

    Corpo vazio vale como {}; JSON inválido ou não-objeto retorna None.
    """
    raw_body = await request.body()
    if not raw_body.strip():
        return {}
    try:
        data = json.loads(raw_body)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def parse_model(model: type[ModelT], data: dict[str, Any]) -> ModelT | JSONResponse:
    """Valida o formato do corpo; erro vira 400 com a lista de problemas."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request body",
            errors=exc.errors(include_url=False, include_context=False, include_input=False),
        )
