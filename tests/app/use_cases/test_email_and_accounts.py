"""Testes dos use cases de email OTP e redefinição de senha."""

from __future__ import annotations

import pytest

from app.domain.accounts import OtpEmailRequest, PasswordResetRequest
from app.infra.http import HttpError
from app.protocols.identity_provider import INTERNAL_ERROR, USER_NOT_FOUND, WEAK_PASSWORD
from app.use_cases.accounts import ResetPasswordUseCase
from app.use_cases.email import SendOtpEmailUseCase
from app.use_cases.results import Failure, Success
from tests.fakes.fake_http_providers import FakeEmailSender
from tests.fakes.fake_identity_provider import FakeIdentityProvider


def _otp(**overrides) -> OtpEmailRequest:
    payload = {
        "from": "no-reply@example.com",
        "to": "user@example.com",
        "subject": "Seu código",
        "text": "123456",
    }
    payload.update(overrides)
    return OtpEmailRequest.model_validate(payload)


class TestSendOtpEmail:
    """Testes para SendOtpEmailUseCase."""

    @pytest.mark.asyncio
    async def test_sends_email(self) -> None:
        sender = FakeEmailSender()

        result = await SendOtpEmailUseCase(sender).execute(_otp())

        assert isinstance(result, Success)
        assert result.data == {
            "message": "OTP email sent successfully",
            "recipient": "user@example.com",
        }
        assert len(sender.sent) == 1

    @pytest.mark.asyncio
    async def test_requires_text_or_html(self) -> None:
        sender = FakeEmailSender()

        result = await SendOtpEmailUseCase(sender).execute(_otp(text=None))

        assert isinstance(result, Failure)
        assert result.kind == "invalid_input"
        assert result.message == "Either text or html content is required"
        assert sender.sent == []

    @pytest.mark.asyncio
    async def test_html_only_is_accepted(self) -> None:
        sender = FakeEmailSender()

        result = await SendOtpEmailUseCase(sender).execute(_otp(text=None, html="<b>123456</b>"))

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_not_configured(self) -> None:
        result = await SendOtpEmailUseCase(None).execute(_otp())

        assert isinstance(result, Failure)
        assert result.kind == "not_configured"
        assert result.message == "Email service not configured - missing MAILERSEND_API_KEY"

    @pytest.mark.asyncio
    async def test_provider_error_is_relayed(self) -> None:
        sender = FakeEmailSender(
            error=HttpError("http_status_422", status_code=422, payload={"message": "bad from"})
        )

        result = await SendOtpEmailUseCase(sender).execute(_otp())

        assert isinstance(result, Failure)
        assert result.kind == "upstream_error"
        assert result.message == "Failed to send OTP email"
        assert result.error == {"message": "bad from"}


class TestResetPassword:
    """Testes para ResetPasswordUseCase."""

    @pytest.mark.asyncio
    async def test_updates_password(self) -> None:
        provider = FakeIdentityProvider({"user@example.com": "uid-1"})
        request = PasswordResetRequest.model_validate(
            {"email": "user@example.com", "newPassword": "secret1"}
        )

        result = await ResetPasswordUseCase(provider).execute(request)

        assert isinstance(result, Success)
        assert result.data == {
            "message": "Password updated successfully",
            "email": "user@example.com",
        }
        assert provider.passwords == {"uid-1": "secret1"}

    @pytest.mark.asyncio
    async def test_invalid_email(self) -> None:
        provider = FakeIdentityProvider()
        request = PasswordResetRequest(email="not an email", new_password="secret1")

        result = await ResetPasswordUseCase(provider).execute(request)

        assert isinstance(result, Failure)
        assert result.kind == "invalid_input"
        assert result.message == "Invalid email format"

    @pytest.mark.asyncio
    async def test_short_password(self) -> None:
        provider = FakeIdentityProvider({"user@example.com": "uid-1"})
        request = PasswordResetRequest(email="user@example.com", new_password="12345")

        result = await ResetPasswordUseCase(provider).execute(request)

        assert isinstance(result, Failure)
        assert result.message == "Password must be at least 6 characters long"
        assert provider.passwords == {}

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self) -> None:
        request = PasswordResetRequest(email="ghost@example.com", new_password="secret1")

        result = await ResetPasswordUseCase(FakeIdentityProvider()).execute(request)

        assert isinstance(result, Failure)
        assert result.kind == "not_found"
        assert result.message == "User not found"
        assert result.error_code == USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_weak_password_is_rejected(self) -> None:
        provider = FakeIdentityProvider({"user@example.com": "uid-1"}, update_error=WEAK_PASSWORD)
        request = PasswordResetRequest(email="user@example.com", new_password="secret1")

        result = await ResetPasswordUseCase(provider).execute(request)

        assert isinstance(result, Failure)
        assert result.kind == "rejected"
        assert result.message == "Password is too weak"

    @pytest.mark.asyncio
    async def test_other_provider_error_uses_generic_message(self) -> None:
        provider = FakeIdentityProvider({"user@example.com": "uid-1"}, update_error=INTERNAL_ERROR)
        request = PasswordResetRequest(email="user@example.com", new_password="secret1")

        result = await ResetPasswordUseCase(provider).execute(request)

        assert isinstance(result, Failure)
        assert result.message == "Reset password failed"
        assert result.error_code == INTERNAL_ERROR

    @pytest.mark.asyncio
    async def test_not_configured(self) -> None:
        request = PasswordResetRequest(email="user@example.com", new_password="secret1")

        result = await ResetPasswordUseCase(None).execute(request)

        assert isinstance(result, Failure)
        assert result.kind == "not_configured"
        assert result.message == "Firebase not configured"
