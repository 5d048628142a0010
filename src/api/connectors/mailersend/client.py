"""Cliente HTTP especializado para a API da MailerSend.

A MailerSend responde 202 sem corpo em caso de sucesso; o ID da
mensagem vem no header X-Message-Id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.email import build_otp_email_payload
from app.infra.http import HttpClient, HttpClientConfig
from app.protocols.http_client import EmailSenderProtocol

if TYPE_CHECKING:
    import httpx

    from app.domain.accounts import OtpEmailRequest
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)


class MailerSendClient(HttpClient, EmailSenderProtocol):
    """Envio de email via MailerSend com Bearer token."""

    def __init__(
        self,
        settings: EmailSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                default_headers={"Content-Type": "application/json"},
            ),
            transport=transport,
        )
        self._settings = settings

    async def send_email(self, request: OtpEmailRequest) -> dict[str, Any]:
        """Envia email.

        Raises:
            ValueError: Se a API key estiver vazia
            HttpError: Em timeout, erro de conexão ou status de erro
        """
        if not self._settings.api_key:
            raise ValueError("MAILERSEND_API_KEY é obrigatório para envio de email")

        response = await self.post(
            self._settings.api_url,
            json=build_otp_email_payload(request),
            headers={"Authorization": f"Bearer {self._settings.api_key}"},
        )
        message_id = response.headers.get("x-message-id")
        logger.info(
            "email_sent",
            extra={"status_code": response.status_code, "message_id": message_id},
        )
        return {"message_id": message_id}
