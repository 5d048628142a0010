"""Endpoint de envio de email de OTP."""

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
from app.domain.accounts import OtpEmailRequest

router = APIRouter()

OTP_REQUIRED_FIELDS = ("from", "to", "subject")


@router.post("/send-otp")
async def send_otp(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    """Repassa um email (text e/ou html) ao provedor."""
    body = await read_json_object(request)
    if body is None:
        return invalid_json_response()

    missing = find_missing_fields(body, OTP_REQUIRED_FIELDS)
    if missing:
        return missing_fields_response(missing)

    parsed = parse_model(OtpEmailRequest, body)
    if isinstance(parsed, JSONResponse):
        return parsed

    result = await container.send_otp().execute(parsed)
    return render_result(result)
