"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - firestore_payment_store: registros de pagamento no Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_payment_store import FirestorePaymentStore

__all__ = ["FirestorePaymentStore"]
