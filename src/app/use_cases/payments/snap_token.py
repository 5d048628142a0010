"""Use case de geração de Snap token (checkout hospedado)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpError
from app.use_cases.results import Failure, Success, UseCaseResult

if TYPE_CHECKING:
    from app.domain.payment_requests import SnapTokenRequest
    from app.protocols.http_client import PaymentGatewayProtocol

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Midtrans not configured - missing MIDTRANS_SERVER_KEY"
RECORD_NOTE = "Ensure payment record is created in Firebase by frontend"


class GenerateSnapTokenUseCase:
    """Solicita ao gateway um token de sessão para o pedido."""

    def __init__(self, gateway: PaymentGatewayProtocol | None) -> None:
        self._gateway = gateway

    async def execute(self, request: SnapTokenRequest) -> UseCaseResult:
        if self._gateway is None:
            return Failure("not_configured", NOT_CONFIGURED_MESSAGE)

        try:
            response = await self._gateway.create_snap_token(request)
        except HttpError as exc:
            logger.error(
                "snap_token_failed",
                extra={"order_id": request.order_id, "status_code": exc.status_code},
            )
            return Failure(
                "upstream_error",
                "Failed to generate payment token",
                error=exc.payload if exc.payload is not None else str(exc),
            )

        return Success(
            {
                "snap_token": response["token"],
                "redirect_url": response.get("redirect_url"),
                "order_id": request.order_id,
                "message": "Payment token generated successfully",
                "note": RECORD_NOTE,
            }
        )
