"""Testes das settings carregadas de variáveis de ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    EmailSettings,
    FirebaseSettings,
    MidtransSettings,
    get_base_settings,
    get_email_settings,
    get_firebase_settings,
    get_midtrans_settings,
)

_ENV_VARS = (
    "ENVIRONMENT",
    "PORT",
    "LOG_LEVEL",
    "CORS_ALLOW_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
    "MAILERSEND_API_KEY",
    "MIDTRANS_SERVER_KEY",
    "MIDTRANS_IS_PRODUCTION",
    "FIREBASE_PROJECT_ID",
    "FIREBASE_PRIVATE_KEY",
    "FIREBASE_CLIENT_EMAIL",
    "FIREBASE_PAYMENTS_COLLECTION",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestBaseSettings:
    def test_defaults(self) -> None:
        settings = get_base_settings()
        assert settings.environment == "development"
        assert settings.port == 3000
        assert settings.cors_allow_origins == ("*",)
        assert settings.cors_is_permissive is True
        assert settings.validate() == []

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example.com, https://b.example.com")

        settings = get_base_settings()

        assert settings.is_production is True
        assert settings.port == 8080
        assert settings.cors_allow_origins == ("https://a.example.com", "https://b.example.com")
        assert settings.cors_is_permissive is False

    def test_invalid_port_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")

        errors = get_base_settings().validate()

        assert any("PORT" in error for error in errors)


class TestIntegrationSettings:
    def test_integrations_disabled_without_credentials(self) -> None:
        assert get_email_settings().enabled is False
        assert get_midtrans_settings().enabled is False
        assert get_firebase_settings().enabled is False

    def test_midtrans_hosts_follow_environment(self) -> None:
        sandbox = MidtransSettings(server_key="SB-key")
        production = MidtransSettings(server_key="live-key", is_production=True)

        assert sandbox.snap_url == "https://app.sandbox.midtrans.com/snap/v1/transactions"
        assert sandbox.core_api_url == "https://api.sandbox.midtrans.com"
        assert production.snap_url == "https://app.midtrans.com/snap/v1/transactions"
        assert production.core_api_url == "https://api.midtrans.com"

    def test_midtrans_sandbox_key_in_production_is_invalid(self) -> None:
        settings = MidtransSettings(server_key="SB-Mid-server-x", is_production=True)
        assert settings.validate()

    def test_midtrans_env_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MIDTRANS_SERVER_KEY", "live-key")
        monkeypatch.setenv("MIDTRANS_IS_PRODUCTION", "true")

        settings = get_midtrans_settings()

        assert settings.enabled is True
        assert settings.is_production is True

    def test_email_settings_validate(self) -> None:
        assert EmailSettings(api_key="k").validate() == []
        assert EmailSettings().validate() == ["MAILERSEND_API_KEY não configurado"]

    def test_firebase_private_key_is_unescaped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIREBASE_PROJECT_ID", "proj-1")
        monkeypatch.setenv("FIREBASE_PRIVATE_KEY", "-----BEGIN-----\\nabc\\n-----END-----")
        monkeypatch.setenv("FIREBASE_CLIENT_EMAIL", "svc@proj-1.iam.gserviceaccount.com")

        settings = get_firebase_settings()
        info = settings.service_account_info()

        assert settings.enabled is True
        assert info["private_key"] == "-----BEGIN-----\nabc\n-----END-----"
        assert info["type"] == "service_account"
        assert info["client_x509_cert_url"].endswith("svc@proj-1.iam.gserviceaccount.com")
        assert settings.payments_collection == "payments"

    def test_firebase_requires_client_email_when_enabled(self) -> None:
        settings = FirebaseSettings(project_id="p", private_key="k")
        assert settings.validate() == [
            "FIREBASE_CLIENT_EMAIL obrigatório quando Firebase está habilitado"
        ]
