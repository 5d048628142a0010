"""Use case de envio de email de OTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpError
from app.use_cases.results import Failure, Success, UseCaseResult

if TYPE_CHECKING:
    from app.domain.accounts import OtpEmailRequest
    from app.protocols.http_client import EmailSenderProtocol

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Email service not configured - missing MAILERSEND_API_KEY"


class SendOtpEmailUseCase:
    """Repassa o email ao provedor; conteúdo text/html é obrigatório."""

    def __init__(self, sender: EmailSenderProtocol | None) -> None:
        self._sender = sender

    async def execute(self, request: OtpEmailRequest) -> UseCaseResult:
        if not request.has_content:
            return Failure("invalid_input", "Either text or html content is required")

        if self._sender is None:
            return Failure("not_configured", NOT_CONFIGURED_MESSAGE)

        try:
            await self._sender.send_email(request)
        except HttpError as exc:
            logger.error(
                "otp_email_failed",
                extra={"status_code": exc.status_code, "error": str(exc)},
            )
            return Failure(
                "upstream_error",
                "Failed to send OTP email",
                error=exc.payload if exc.payload is not None else str(exc),
            )

        return Success(
            {
                "message": "OTP email sent successfully",
                "recipient": request.recipient,
            }
        )
