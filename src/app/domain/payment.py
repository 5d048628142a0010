"""Modelos de domínio de pagamento.

Normalização do status do gateway (Midtrans) para o status persistido no
registro de pagamento do Firestore. O registro em si pertence ao frontend:
o backend apenas atualiza registros já existentes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class PaymentStatus(StrEnum):
    """Status normalizado gravado no PaymentRecord."""

    SUCCESS = "success"
    PENDING = "pending"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    FAILED = "failed"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class StatusInfo:
    """Par derivado de transaction_status; nunca persistido isoladamente."""

    status: PaymentStatus
    is_paid: bool


UNKNOWN_STATUS = StatusInfo(PaymentStatus.UNKNOWN, is_paid=False)

# Case-sensitive: "Settlement" não é "settlement"
TRANSACTION_STATUS_MAP: dict[str, StatusInfo] = {
    "settlement": StatusInfo(PaymentStatus.SUCCESS, is_paid=True),
    "capture": StatusInfo(PaymentStatus.SUCCESS, is_paid=True),
    "pending": StatusInfo(PaymentStatus.PENDING, is_paid=False),
    "cancel": StatusInfo(PaymentStatus.CANCELLED, is_paid=False),
    "expire": StatusInfo(PaymentStatus.EXPIRED, is_paid=False),
    "deny": StatusInfo(PaymentStatus.FAILED, is_paid=False),
    "failure": StatusInfo(PaymentStatus.FAILED, is_paid=False),
}

FINISH_MESSAGES: dict[PaymentStatus, str] = {
    PaymentStatus.SUCCESS: "Payment completed successfully",
    PaymentStatus.PENDING: "Payment is still pending",
    PaymentStatus.CANCELLED: "Payment was cancelled",
    PaymentStatus.EXPIRED: "Payment has expired",
    PaymentStatus.FAILED: "Payment failed",
}


def map_transaction_status(transaction_status: str | None) -> StatusInfo:
    """Traduz o transaction_status do gateway para StatusInfo.

    Função total: valores desconhecidos, vazios ou None caem em UNKNOWN.
    """
    if not isinstance(transaction_status, str):
        return UNKNOWN_STATUS
    return TRANSACTION_STATUS_MAP.get(transaction_status, UNKNOWN_STATUS)


def finish_message_for(status: PaymentStatus) -> str:
    """Mensagem exibida ao usuário após o redirect de finalização."""
    return FINISH_MESSAGES.get(status, "Payment status unknown")


@dataclass(frozen=True, slots=True)
class TransactionDetails:
    """Campos opcionais de enriquecimento vindos do gateway."""

    payment_type: Any = None
    transaction_time: Any = None
    gross_amount: Any = None
    fraud_status: Any = None
    currency: Any = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> TransactionDetails:
        return cls(
            payment_type=payload.get("payment_type"),
            transaction_time=payload.get("transaction_time"),
            gross_amount=payload.get("gross_amount"),
            fraud_status=payload.get("fraud_status"),
            currency=payload.get("currency"),
        )

    def to_record_fields(self) -> dict[str, Any]:
        """Todos os cinco campos; vazios viram None (null no Firestore)."""
        return {
            "payment_type": self.payment_type or None,
            "transaction_time": self.transaction_time or None,
            "gross_amount": self.gross_amount or None,
            "fraud_status": self.fraud_status or None,
            "currency": self.currency or None,
        }


@dataclass(frozen=True, slots=True)
class RecordUpdateResult:
    """Resultado não-fatal de uma tentativa de atualização do registro."""

    success: bool
    message: str
    status: PaymentStatus | None = None
    is_paid: bool | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.status is not None:
            payload["status"] = self.status.value
            payload["is_paid"] = self.is_paid
        if self.error is not None:
            payload["error"] = self.error
        return payload
