"""Testes do composition root (container e validação de startup)."""

from __future__ import annotations

import pytest

from app.bootstrap import build_service_container, validate_runtime_settings
from app.bootstrap import container as container_module

_ENV_VARS = (
    "ENVIRONMENT",
    "MAILERSEND_API_KEY",
    "MIDTRANS_SERVER_KEY",
    "MIDTRANS_IS_PRODUCTION",
    "FIREBASE_PROJECT_ID",
    "FIREBASE_PRIVATE_KEY",
    "FIREBASE_CLIENT_EMAIL",
    "CORS_ALLOW_ORIGINS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_container_without_credentials_disables_everything() -> None:
    container = build_service_container()

    assert container.runtime.firebase_enabled is False
    assert container.runtime.email_config_ok is False
    assert container.runtime.midtrans_config_ok is False
    assert container.record_store is None
    assert container.payment_gateway is None
    assert container.record_updater().enabled is False


def test_container_with_provider_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAILERSEND_API_KEY", "ms-key")
    monkeypatch.setenv("MIDTRANS_SERVER_KEY", "SB-key")

    container = build_service_container()

    assert container.runtime.email_config_ok is True
    assert container.runtime.midtrans_config_ok is True
    assert container.midtrans_server_key == "SB-key"
    assert "SB-key" not in repr(container)


def test_firebase_init_failure_keeps_service_up(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIREBASE_PROJECT_ID", "proj-1")
    monkeypatch.setenv("FIREBASE_PRIVATE_KEY", "not-a-pem")

    def _fail(settings):
        raise ValueError("Could not deserialize key data")

    monkeypatch.setattr(container_module, "create_firestore_client", _fail)

    container = build_service_container()

    assert container.runtime.firebase_enabled is False
    assert container.record_store is None
    assert container.identity_provider is None


def test_validation_is_lenient_in_development() -> None:
    validate_runtime_settings()


def test_validation_fails_fast_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("MIDTRANS_SERVER_KEY", "SB-Mid-server-x")
    monkeypatch.setenv("MIDTRANS_IS_PRODUCTION", "true")

    with pytest.raises(RuntimeError, match="Configuração inválida para production"):
        validate_runtime_settings()


def test_missing_integrations_do_not_fail_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    validate_runtime_settings()
