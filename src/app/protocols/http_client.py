"""Protocolos dos provedores HTTP externos (email e gateway).

Evita dependência direta da camada api: os connectors concretos ficam em
api/connectors e são conectados pelo bootstrap. Falhas são levantadas
como app.infra.http.HttpError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.accounts import OtpEmailRequest
    from app.domain.payment_requests import SnapTokenRequest


class EmailSenderProtocol(Protocol):
    """Contrato mínimo para envio de email transacional."""

    async def send_email(self, request: OtpEmailRequest) -> dict[str, Any]: ...


class PaymentGatewayProtocol(Protocol):
    """Contrato mínimo para o gateway de pagamento."""

    async def create_snap_token(self, request: SnapTokenRequest) -> dict[str, Any]:
        """Cria sessão de checkout; resposta contém `token`."""
        ...

    async def get_transaction_status(self, order_id: str) -> dict[str, Any]:
        """Consulta o status ao vivo de uma transação."""
        ...
