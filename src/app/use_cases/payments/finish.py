"""Use case do redirect de finalização de pagamento.

Redirect do navegador do usuário, não do gateway: sem assinatura, o
status informado na query é apenas refletido no registro.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.payment import finish_message_for, map_transaction_status
from app.use_cases.results import Success, UseCaseResult

if TYPE_CHECKING:
    from app.use_cases.payments.record_updater import PaymentRecordUpdater


class FinishPaymentUseCase:
    def __init__(self, updater: PaymentRecordUpdater) -> None:
        self._updater = updater

    async def execute(self, order_id: str, transaction_status: str | None) -> UseCaseResult:
        status_info = map_transaction_status(transaction_status)
        update_result = await self._updater.update(order_id, status_info, transaction_status)
        return Success(
            {
                "message": finish_message_for(status_info.status),
                "order_id": order_id,
                "status": status_info.status.value,
                "is_paid": status_info.is_paid,
                "firebase_update": update_result.as_dict(),
            },
            ok=status_info.is_paid,
        )
