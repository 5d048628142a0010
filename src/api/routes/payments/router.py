"""Endpoints de pagamento (Midtrans).

Endpoints:
- POST /generate-snap-token: cria sessão de checkout
- POST /midtrans-webhook: notificação do gateway (assinada)
- GET /payment-finish: redirect do usuário (não assinado)
- GET /payment-status/{order_id} e POST /payment-status: consulta ao vivo

Registros de pagamento são criados pelo frontend; aqui só atualizamos.
"""

from __future__ import annotations

import logging

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
from app.domain.payment_requests import MidtransNotification, SnapTokenRequest

logger = logging.getLogger(__name__)

router = APIRouter()

SNAP_REQUIRED_FIELDS = ("order_id", "gross_amount", "customer_details", "item_details")
WEBHOOK_REQUIRED_FIELDS = ("order_id", "signature_key", "transaction_status")
ORDER_ID_FIELD = ("order_id",)


@router.post("/generate-snap-token")
async def generate_snap_token(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    body = await read_json_object(request)
    if body is None:
        return invalid_json_response()

    missing = find_missing_fields(body, SNAP_REQUIRED_FIELDS)
    if missing:
        return missing_fields_response(missing)

    parsed = parse_model(SnapTokenRequest, body)
    if isinstance(parsed, JSONResponse):
        return parsed

    result = await container.generate_snap_token().execute(parsed)
    return render_result(result)


@router.post("/midtrans-webhook")
async def midtrans_webhook(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    """Notificação do gateway.

    Validações, nesta ordem:
    1. Campos obrigatórios
    2. Midtrans configurado
    3. Assinatura SHA-512 (antes de qualquer acesso ao store)
    """
    body = await read_json_object(request)
    if body is None:
        return invalid_json_response()

    missing = find_missing_fields(body, WEBHOOK_REQUIRED_FIELDS)
    if missing:
        return missing_fields_response(missing)

    parsed = parse_model(MidtransNotification, body)
    if isinstance(parsed, JSONResponse):
        return parsed

    logger.info(
        "payment_notification_received",
        extra={"order_id": parsed.order_id, "transaction_status": parsed.transaction_status},
    )
    result = await container.process_notification().execute(parsed)
    return render_result(result)


@router.get("/payment-finish")
async def payment_finish(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    """Redirect do navegador após o checkout (não é confiável como webhook)."""
    query = dict(request.query_params)
    missing = find_missing_fields(query, ORDER_ID_FIELD)
    if missing:
        return missing_fields_response(missing)

    result = await container.finish_payment().execute(
        query["order_id"],
        query.get("transaction_status"),
    )
    return render_result(result)


@router.get("/payment-status/{order_id}")
async def payment_status_by_path(
    order_id: str,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    result = await container.lookup_status().execute(order_id)
    return render_result(result)


@router.post("/payment-status")
async def payment_status_by_body(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    body = await read_json_object(request)
    if body is None:
        return invalid_json_response()

    missing = find_missing_fields(body, ORDER_ID_FIELD)
    if missing:
        return missing_fields_response(missing)

    result = await container.lookup_status().execute(str(body["order_id"]))
    return render_result(result)
