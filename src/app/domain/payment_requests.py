"""Contratos de entrada dos fluxos de pagamento.

A presença dos campos obrigatórios é checada antes (lista de campos
faltantes no envelope 400); estes modelos só validam o formato.
IDs numéricos (order_id) são aceitos e convertidos para texto.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CUSTOMER_FIRST_NAME = "Customer"


class CustomerDetails(BaseModel):
    """Dados do comprador repassados ao Snap."""

    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    email: str | None = None
    phone: str | None = None


class ItemDetail(BaseModel):
    """Item do pedido no formato aceito pelo Snap."""

    model_config = ConfigDict(extra="ignore")

    id: str | int | None = None
    price: int | float
    quantity: int = Field(..., ge=1)
    name: str


class SnapTokenRequest(BaseModel):
    """Pedido de geração de Snap token."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    order_id: str
    gross_amount: int | float | str
    customer_details: CustomerDetails
    item_details: list[ItemDetail]


class MidtransNotification(BaseModel):
    """Notificação HTTP (webhook) enviada pelo Midtrans.

    status_code e gross_amount entram na assinatura e são mantidos
    exatamente como recebidos.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    order_id: str
    signature_key: str
    transaction_status: str
    status_code: Any = None
    gross_amount: Any = None
    payment_type: str | None = None
    transaction_time: str | None = None
    fraud_status: str | None = None
    currency: str | None = None

    def enrichment_payload(self) -> dict[str, Any]:
        return self.model_dump(
            include={"payment_type", "transaction_time", "gross_amount", "fraud_status", "currency"}
        )
