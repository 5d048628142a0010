"""Composition root: configuração imutável + implementações concretas.

Construído uma única vez no startup e guardado em `app.state.container`.
Integrações sem credenciais ficam como None e os use cases respondem
"not configured" em vez de derrubar o processo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_firestore_client, create_identity_client
from app.infra.stores.firestore_payment_store import FirestorePaymentStore
from app.use_cases.accounts import ResetPasswordUseCase
from app.use_cases.email import SendOtpEmailUseCase
from app.use_cases.payments import (
    FinishPaymentUseCase,
    GenerateSnapTokenUseCase,
    PaymentRecordUpdater,
    PaymentStatusLookupUseCase,
    ProcessPaymentNotificationUseCase,
)
from config.settings import (
    get_base_settings,
    get_email_settings,
    get_firebase_settings,
    get_midtrans_settings,
)

if TYPE_CHECKING:
    from app.protocols import (
        EmailSenderProtocol,
        IdentityProviderProtocol,
        PaymentGatewayProtocol,
        PaymentRecordStoreProtocol,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Flags calculadas no startup e expostas em / e /health."""

    environment: str = "development"
    firebase_enabled: bool = False
    email_config_ok: bool = False
    midtrans_config_ok: bool = False
    midtrans_is_production: bool = False


@dataclass(frozen=True, slots=True)
class ServiceContainer:
    """Capacidades injetadas nas rotas via Depends(get_container)."""

    runtime: RuntimeConfig
    record_store: PaymentRecordStoreProtocol | None = None
    email_sender: EmailSenderProtocol | None = None
    payment_gateway: PaymentGatewayProtocol | None = None
    identity_provider: IdentityProviderProtocol | None = None
    midtrans_server_key: str = field(default="", repr=False)

    def record_updater(self) -> PaymentRecordUpdater:
        return PaymentRecordUpdater(self.record_store)

    def send_otp(self) -> SendOtpEmailUseCase:
        return SendOtpEmailUseCase(self.email_sender)

    def reset_password(self) -> ResetPasswordUseCase:
        return ResetPasswordUseCase(self.identity_provider)

    def generate_snap_token(self) -> GenerateSnapTokenUseCase:
        return GenerateSnapTokenUseCase(self.payment_gateway)

    def process_notification(self) -> ProcessPaymentNotificationUseCase:
        return ProcessPaymentNotificationUseCase(self.midtrans_server_key, self.record_updater())

    def finish_payment(self) -> FinishPaymentUseCase:
        return FinishPaymentUseCase(self.record_updater())

    def lookup_status(self) -> PaymentStatusLookupUseCase:
        return PaymentStatusLookupUseCase(
            self.payment_gateway,
            self.record_updater(),
            self.record_store,
        )


def build_service_container() -> ServiceContainer:
    """Cria o container a partir das settings de ambiente."""
    from api.connectors.mailersend import MailerSendClient
    from api.connectors.midtrans import MidtransClient

    base_settings = get_base_settings()
    email_settings = get_email_settings()
    midtrans_settings = get_midtrans_settings()
    firebase_settings = get_firebase_settings()

    record_store: PaymentRecordStoreProtocol | None = None
    identity_provider: IdentityProviderProtocol | None = None
    if firebase_settings.enabled:
        try:
            record_store = FirestorePaymentStore(
                create_firestore_client(firebase_settings),
                collection=firebase_settings.payments_collection,
            )
            identity_provider = create_identity_client(firebase_settings)
        except Exception as exc:
            # Firebase é opcional: segue sem store/identidade
            logger.warning("firebase_init_failed", extra={"error_type": type(exc).__name__})
            record_store = None
            identity_provider = None

    email_sender = MailerSendClient(email_settings) if email_settings.enabled else None
    payment_gateway = MidtransClient(midtrans_settings) if midtrans_settings.enabled else None

    runtime = RuntimeConfig(
        environment=base_settings.environment,
        firebase_enabled=record_store is not None,
        email_config_ok=email_sender is not None,
        midtrans_config_ok=payment_gateway is not None,
        midtrans_is_production=midtrans_settings.is_production,
    )
    logger.info(
        "service_container_built",
        extra={
            "component": "bootstrap",
            "firebase_enabled": runtime.firebase_enabled,
            "email_config_ok": runtime.email_config_ok,
            "midtrans_config_ok": runtime.midtrans_config_ok,
        },
    )
    return ServiceContainer(
        runtime=runtime,
        record_store=record_store,
        email_sender=email_sender,
        payment_gateway=payment_gateway,
        identity_provider=identity_provider,
        midtrans_server_key=midtrans_settings.server_key,
    )
