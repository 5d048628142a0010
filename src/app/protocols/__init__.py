"""Protocolos e contratos do core da aplicação."""

from .http_client import EmailSenderProtocol, PaymentGatewayProtocol
from .identity_provider import IdentityProviderError, IdentityProviderProtocol
from .payment_record_store import PaymentRecordStoreProtocol

__all__ = [
    "EmailSenderProtocol",
    "IdentityProviderError",
    "IdentityProviderProtocol",
    "PaymentGatewayProtocol",
    "PaymentRecordStoreProtocol",
]
