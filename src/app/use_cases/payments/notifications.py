"""Use case de processamento de notificações (webhook) do Midtrans.

A assinatura é a única barreira contra notificações forjadas: nenhuma
leitura ou escrita no store acontece antes dela ser validada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.payment import PaymentStatus, TransactionDetails, map_transaction_status
from app.infra.crypto import verify_midtrans_signature
from app.use_cases.results import Failure, Success, UseCaseResult

if TYPE_CHECKING:
    from app.domain.payment_requests import MidtransNotification
    from app.use_cases.payments.record_updater import PaymentRecordUpdater

logger = logging.getLogger(__name__)


class ProcessPaymentNotificationUseCase:
    """Valida assinatura, normaliza status e atualiza o registro."""

    def __init__(self, server_key: str, updater: PaymentRecordUpdater) -> None:
        self._server_key = server_key
        self._updater = updater

    async def execute(self, notification: MidtransNotification) -> UseCaseResult:
        if not self._server_key:
            return Failure("not_configured", "Midtrans not configured")

        if not verify_midtrans_signature(
            notification.order_id,
            notification.status_code,
            notification.gross_amount,
            notification.signature_key,
            self._server_key,
        ):
            logger.warning(
                "payment_notification_signature_invalid",
                extra={"order_id": notification.order_id},
            )
            return Failure("rejected", "Invalid signature")

        status_info = map_transaction_status(notification.transaction_status)
        update_result = await self._updater.update(
            notification.order_id,
            status_info,
            notification.transaction_status,
            TransactionDetails.from_payload(notification.enrichment_payload()),
        )

        logger.info(
            "payment_notification_processed",
            extra={
                "order_id": notification.order_id,
                "status": status_info.status.value,
                "record_updated": update_result.success,
                "paid": status_info.status is PaymentStatus.SUCCESS,
            },
        )
        return Success(
            {
                "message": "Webhook processed successfully",
                "order_id": notification.order_id,
                "status": status_info.status.value,
                "is_paid": status_info.is_paid,
                "firebase_update": update_result.as_dict(),
            }
        )
