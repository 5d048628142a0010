"""Fake in-memory do store de PaymentRecords para testes deterministas."""

from __future__ import annotations

import copy
from datetime import UTC, datetime, timedelta
from typing import Any

from utils.errors import FirestoreUnavailableError


class FakePaymentRecordStore:
    """Implementa o protocolo sem IO.

    O relógio avança um segundo a cada update para que `updated_at`
    seja monotônico e verificável nos testes.
    """

    def __init__(self, records: dict[str, dict[str, Any]] | None = None) -> None:
        self.records: dict[str, dict[str, Any]] = copy.deepcopy(records or {})
        self.get_calls: list[str] = []
        self.update_calls: list[tuple[str, dict[str, Any]]] = []
        self.fail_reads = False
        self.fail_writes = False
        self.fail_ping = False
        self._clock = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)

    @property
    def touched(self) -> bool:
        return bool(self.get_calls or self.update_calls)

    async def get(self, order_id: str) -> dict[str, Any] | None:
        self.get_calls.append(order_id)
        if self.fail_reads:
            raise FirestoreUnavailableError("read unavailable")
        record = self.records.get(order_id)
        return copy.deepcopy(record) if record is not None else None

    async def update(self, order_id: str, fields: dict[str, Any]) -> None:
        self.update_calls.append((order_id, dict(fields)))
        if self.fail_writes:
            raise FirestoreUnavailableError("write unavailable")
        if order_id not in self.records:
            raise FirestoreUnavailableError(f"No document to update: {order_id}")
        self._clock += timedelta(seconds=1)
        self.records[order_id].update({**fields, "updated_at": self._clock})

    async def ping(self) -> None:
        if self.fail_ping:
            raise FirestoreUnavailableError("ping failed")
