"""Testes dos builders de payload (MailerSend e Snap)."""

from __future__ import annotations

from api.payload_builders.email import build_otp_email_payload
from api.payload_builders.midtrans import build_basic_auth_header, build_snap_transaction_payload
from app.domain.accounts import OtpEmailRequest
from app.domain.payment_requests import SnapTokenRequest


def test_otp_payload_omits_empty_content() -> None:
    request = OtpEmailRequest.model_validate(
        {"from": "a@example.com", "to": "b@example.com", "subject": "OTP", "text": "123456"}
    )

    assert build_otp_email_payload(request) == {
        "from": {"email": "a@example.com"},
        "to": [{"email": "b@example.com"}],
        "subject": "OTP",
        "text": "123456",
    }


def test_basic_auth_uses_empty_password() -> None:
    # base64("SB-key:")
    assert build_basic_auth_header("SB-key") == "Basic U0Ita2V5Og=="


def test_snap_payload_fills_customer_defaults() -> None:
    request = SnapTokenRequest.model_validate(
        {
            "order_id": "ORD1",
            "gross_amount": "25000",
            "customer_details": {},
            "item_details": [
                {"id": "a", "price": 10000, "quantity": 2, "name": "Item A"},
                {"price": 5000, "quantity": 1, "name": "Item B", "category": "ignored"},
            ],
        }
    )

    payload = build_snap_transaction_payload(request)

    assert payload["transaction_details"] == {"order_id": "ORD1", "gross_amount": "25000"}
    assert payload["customer_details"] == {"first_name": "Customer", "email": "", "phone": ""}
    assert payload["item_details"][1] == {
        "id": None,
        "price": 5000,
        "quantity": 1,
        "name": "Item B",
    }
    assert payload["credit_card"] == {"secure": True}
