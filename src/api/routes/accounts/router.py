"""Endpoint de redefinição de senha."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.routes.responses import (
    invalid_json_response,
    missing_fields_response,
    parse_model,
    read_json_object,
    render_result,
)
from api.validators.required_fields import find_missing_fields
from app.bootstrap.container import ServiceContainer
from app.bootstrap.dependencies import get_container
from app.domain.accounts import PasswordResetRequest

router = APIRouter()

RESET_REQUIRED_FIELDS = ("email", "newPassword")


@router.post("/reset-password")
async def reset_password(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    body = await read_json_object(request)
    if body is None:
        return invalid_json_response()

    missing = find_missing_fields(body, RESET_REQUIRED_FIELDS)
    if missing:
        return missing_fields_response(missing)

    parsed = parse_model(PasswordResetRequest, body)
    if isinstance(parsed, JSONResponse):
        return parsed

    result = await container.reset_password().execute(parsed)
    return render_result(result)
