"""Use cases de pagamento (Midtrans + registro no Firestore)."""

from .finish import FinishPaymentUseCase
from .notifications import ProcessPaymentNotificationUseCase
from .record_updater import PaymentRecordUpdater
from .snap_token import GenerateSnapTokenUseCase
from .status_lookup import PaymentStatusLookupUseCase

__all__ = [
    "FinishPaymentUseCase",
    "GenerateSnapTokenUseCase",
    "PaymentRecordUpdater",
    "PaymentStatusLookupUseCase",
    "ProcessPaymentNotificationUseCase",
]
