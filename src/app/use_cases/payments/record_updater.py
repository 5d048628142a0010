"""Atualização condicional do PaymentRecord no document store.

Regras:
- Store desabilitado no startup: resultado "not enabled", sem IO
- Registro inexistente: resultado "not found"; nunca cria registro
- Falha de IO: resultado com `error`; nunca propaga exceção

Reaplicar o mesmo StatusInfo converge para o mesmo estado gravado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.payment import RecordUpdateResult
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.domain.payment import StatusInfo, TransactionDetails
    from app.protocols.payment_record_store import PaymentRecordStoreProtocol

logger = logging.getLogger(__name__)

NOT_ENABLED_MESSAGE = "Firebase not enabled"
NOT_FOUND_MESSAGE = "Payment record not found - must be created by frontend first"
UPDATED_MESSAGE = "Payment status updated successfully"
FAILED_MESSAGE = "Failed to update Firebase"


class PaymentRecordUpdater:
    """Aplica status normalizado em registros pré-existentes."""

    def __init__(self, store: PaymentRecordStoreProtocol | None) -> None:
        self._store = store

    @property
    def enabled(self) -> bool:
        return self._store is not None

    async def update(
        self,
        order_id: str,
        status_info: StatusInfo,
        transaction_status: str | None,
        details: TransactionDetails | None = None,
    ) -> RecordUpdateResult:
        """Atualiza status/is_paid/transaction_status (+ enriquecimento).

        Args:
            order_id: ID do pedido (doc id)
            status_info: Status normalizado
            transaction_status: Status bruto do gateway
            details: Campos opcionais; quando presente, os cinco são gravados
        """
        if self._store is None:
            logger.info("payment_record_update_skipped", extra={"reason": "store_disabled"})
            return RecordUpdateResult(success=False, message=NOT_ENABLED_MESSAGE)

        fields: dict[str, Any] = {
            "status": status_info.status.value,
            "is_paid": status_info.is_paid,
            "transaction_status": transaction_status,
        }
        if details is not None:
            fields.update(details.to_record_fields())

        try:
            existing = await self._store.get(order_id)
            if existing is None:
                logger.warning("payment_record_not_found", extra={"order_id": order_id})
                return RecordUpdateResult(success=False, message=NOT_FOUND_MESSAGE)

            await self._store.update(order_id, fields)
        except InfrastructureError as exc:
            logger.error(
                "payment_record_update_error",
                extra={"order_id": order_id, "error_type": type(exc).__name__},
            )
            return RecordUpdateResult(success=False, message=FAILED_MESSAGE, error=str(exc))

        logger.info(
            "payment_record_status_updated",
            extra={"order_id": order_id, "status": status_info.status.value},
        )
        return RecordUpdateResult(
            success=True,
            message=UPDATED_MESSAGE,
            status=status_info.status,
            is_paid=status_info.is_paid,
        )
