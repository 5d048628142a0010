"""Fixtures das rotas: app completo com container de fakes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import RuntimeConfig, ServiceContainer
from tests.fakes.fake_http_providers import FakeEmailSender, FakePaymentGateway
from tests.fakes.fake_identity_provider import FakeIdentityProvider
from tests.fakes.fake_payment_record_store import FakePaymentRecordStore

SERVER_KEY = "SB-Mid-server-test-key"


@pytest.fixture
def record_store() -> FakePaymentRecordStore:
    return FakePaymentRecordStore(
        {"ORD1": {"order_id": "ORD1", "status": "pending", "is_paid": False, "user_id": "u1"}}
    )


@pytest.fixture
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway(
        {
            "ORD1": {
                "transaction_status": "settlement",
                "payment_type": "bank_transfer",
                "transaction_time": "2026-01-15 12:00:00",
                "gross_amount": "10000.00",
                "currency": "IDR",
            }
        }
    )


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider({"user@example.com": "uid-1"})


@pytest.fixture
def container(record_store, email_sender, payment_gateway, identity_provider) -> ServiceContainer:
    return ServiceContainer(
        runtime=RuntimeConfig(
            firebase_enabled=True,
            email_config_ok=True,
            midtrans_config_ok=True,
        ),
        record_store=record_store,
        email_sender=email_sender,
        payment_gateway=payment_gateway,
        identity_provider=identity_provider,
        midtrans_server_key=SERVER_KEY,
    )


@pytest.fixture
def client(container):
    with TestClient(create_app(container=container), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_client():
    with TestClient(
        create_app(container=ServiceContainer(runtime=RuntimeConfig())),
        raise_server_exceptions=False,
    ) as test_client:
        yield test_client
