"""Use case de consulta de status ao vivo no gateway.

Fluxo:
1. GET /v2/{order_id}/status no Midtrans
2. Normaliza e grava no registro (com enriquecimento)
3. Relê o registro atual para devolver ao frontend
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.payment import TransactionDetails, map_transaction_status
from app.infra.http import HttpError
from app.use_cases.results import Failure, Success, UseCaseResult
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.protocols.http_client import PaymentGatewayProtocol
    from app.protocols.payment_record_store import PaymentRecordStoreProtocol
    from app.use_cases.payments.record_updater import PaymentRecordUpdater

logger = logging.getLogger(__name__)


class PaymentStatusLookupUseCase:
    """Reconciliação do registro com o status atual do gateway."""

    def __init__(
        self,
        gateway: PaymentGatewayProtocol | None,
        updater: PaymentRecordUpdater,
        store: PaymentRecordStoreProtocol | None,
    ) -> None:
        self._gateway = gateway
        self._updater = updater
        self._store = store

    async def execute(self, order_id: str) -> UseCaseResult:
        if self._gateway is None:
            return Failure("not_configured", "Midtrans not configured")

        try:
            gateway_data = await self._gateway.get_transaction_status(order_id)
        except HttpError as exc:
            if exc.status_code == 404:
                logger.info("payment_status_order_not_found", extra={"order_id": order_id})
                return Failure(
                    "not_found",
                    "Order not found in Midtrans",
                    details={"order_id": order_id},
                )
            logger.error(
                "payment_status_lookup_failed",
                extra={"order_id": order_id, "status_code": exc.status_code},
            )
            return Failure("upstream_error", "Failed to check payment status", error=str(exc))

        transaction_status = gateway_data.get("transaction_status")
        status_info = map_transaction_status(transaction_status)
        update_result = await self._updater.update(
            order_id,
            status_info,
            transaction_status,
            TransactionDetails.from_payload(gateway_data),
        )

        return Success(
            {
                "order_id": order_id,
                "status": status_info.status.value,
                "is_paid": status_info.is_paid,
                "transaction_status": transaction_status,
                "payment_type": gateway_data.get("payment_type"),
                "transaction_time": gateway_data.get("transaction_time"),
                "gross_amount": gateway_data.get("gross_amount"),
                "firebase_update": update_result.as_dict(),
                "firebase_data": await self._read_record(order_id),
            }
        )

    async def _read_record(self, order_id: str) -> dict[str, Any] | None:
        if self._store is None:
            return None
        try:
            return await self._store.get(order_id)
        except InfrastructureError as exc:
            logger.error(
                "payment_record_read_failed",
                extra={"order_id": order_id, "error_type": type(exc).__name__},
            )
            return None
