"""Firestore PaymentRecord Store."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.cloud import firestore

from app.protocols.payment_record_store import PaymentRecordStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

PAYMENTS_COLLECTION = "payments"
HEALTH_COLLECTION = "_health"


class FirestorePaymentStore(PaymentRecordStoreProtocol):
    """Store de PaymentRecord usando Firestore (doc id = order_id)."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = PAYMENTS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def get(self, order_id: str) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._get_sync, order_id)

    def _get_sync(self, order_id: str) -> dict[str, Any] | None:
        try:
            doc = self._db.collection(self._collection).document(order_id).get()
        except Exception as exc:
            logger.error(
                "payment_record_get_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(str(exc)) from exc
        if not doc.exists:
            return None
        return doc.to_dict() or {}

    async def update(self, order_id: str, fields: dict[str, Any]) -> None:
        await asyncio.to_thread(self._update_sync, order_id, fields)

    def _update_sync(self, order_id: str, fields: dict[str, Any]) -> None:
        data = {**fields, "updated_at": firestore.SERVER_TIMESTAMP}
        try:
            self._db.collection(self._collection).document(order_id).update(data)
        except Exception as exc:
            logger.error(
                "payment_record_update_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(str(exc)) from exc
        logger.debug("payment_record_updated")

    async def ping(self) -> None:
        await asyncio.to_thread(self._ping_sync)

    def _ping_sync(self) -> None:
        try:
            self._db.collection(HEALTH_COLLECTION).document("check").get()
        except Exception as exc:
            raise FirestoreUnavailableError(str(exc)) from exc
