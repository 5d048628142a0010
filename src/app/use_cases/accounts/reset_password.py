"""Use case de redefinição de senha no provedor de identidade."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.accounts import MIN_PASSWORD_LENGTH, is_valid_email
from app.protocols.identity_provider import (
    INVALID_EMAIL,
    USER_NOT_FOUND,
    WEAK_PASSWORD,
    IdentityProviderError,
)
from app.use_cases.results import Failure, Success, UseCaseResult

if TYPE_CHECKING:
    from app.domain.accounts import PasswordResetRequest
    from app.protocols.identity_provider import IdentityProviderProtocol

logger = logging.getLogger(__name__)

IDENTITY_ERROR_MESSAGES = {
    USER_NOT_FOUND: "User not found",
    INVALID_EMAIL: "Invalid email format",
    WEAK_PASSWORD: "Password is too weak",
}


class ResetPasswordUseCase:
    """Localiza o usuário pelo email e define a nova senha."""

    def __init__(self, identity_provider: IdentityProviderProtocol | None) -> None:
        self._identity_provider = identity_provider

    async def execute(self, request: PasswordResetRequest) -> UseCaseResult:
        if not is_valid_email(request.email):
            return Failure("invalid_input", "Invalid email format")

        if len(request.new_password) < MIN_PASSWORD_LENGTH:
            return Failure(
                "invalid_input",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )

        if self._identity_provider is None:
            return Failure("not_configured", "Firebase not configured")

        try:
            user = await self._identity_provider.get_user_by_email(request.email)
            if user is None:
                raise IdentityProviderError(USER_NOT_FOUND)
            await self._identity_provider.update_password(user.uid, request.new_password)
        except IdentityProviderError as exc:
            return _identity_failure(exc.code)

        return Success(
            {
                "message": "Password updated successfully",
                "email": request.email,
            }
        )


def _identity_failure(code: str) -> Failure:
    logger.warning("password_reset_failed", extra={"error_code": code})
    kind = "not_found" if code == USER_NOT_FOUND else "rejected"
    return Failure(
        kind,
        IDENTITY_ERROR_MESSAGES.get(code, "Reset password failed"),
        error_code=code,
    )
