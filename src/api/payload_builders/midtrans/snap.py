"""Builders da transação Snap e do header de autenticação."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Any

from app.domain.payment_requests import DEFAULT_CUSTOMER_FIRST_NAME

if TYPE_CHECKING:
    from app.domain.payment_requests import SnapTokenRequest


def build_basic_auth_header(server_key: str) -> str:
    """Basic auth do Midtrans: server key como usuário, senha vazia."""
    encoded = base64.b64encode(f"{server_key}:".encode()).decode("ascii")
    return f"Basic {encoded}"


def build_snap_transaction_payload(request: SnapTokenRequest) -> dict[str, Any]:
    """Monta o corpo de POST /snap/v1/transactions.

    Campos de cliente ausentes recebem defaults; 3DS sempre ligado.
    """
    customer = request.customer_details
    return {
        "transaction_details": {
            "order_id": request.order_id,
            "gross_amount": request.gross_amount,
        },
        "customer_details": {
            "first_name": customer.first_name or DEFAULT_CUSTOMER_FIRST_NAME,
            "email": customer.email or "",
            "phone": customer.phone or "",
        },
        "item_details": [
            {
                "id": item.id,
                "price": item.price,
                "quantity": item.quantity,
                "name": item.name,
            }
            for item in request.item_details
        ],
        "credit_card": {"secure": True},
    }
