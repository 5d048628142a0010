"""Protocolo para o store de registros de pagamento."""

from __future__ import annotations

from typing import Any, Protocol


class PaymentRecordStoreProtocol(Protocol):
    """Contrato do document store que guarda PaymentRecords.

    O store nunca é usado para criar registros: eles nascem no frontend.
    Falhas de IO são levantadas como InfrastructureError.
    """

    async def get(self, order_id: str) -> dict[str, Any] | None:
        """Busca o registro pelo order_id; None se não existir."""
        ...

    async def update(self, order_id: str, fields: dict[str, Any]) -> None:
        """Atualiza campos de um registro existente.

        O store atribui `updated_at` com o timestamp do servidor.
        """
        ...

    async def ping(self) -> None:
        """Leitura mínima para readiness; levanta em caso de falha."""
        ...
