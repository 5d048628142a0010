"""Builder do payload de envio da MailerSend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.accounts import OtpEmailRequest


def build_otp_email_payload(request: OtpEmailRequest) -> dict[str, Any]:
    """Monta o corpo de POST /v1/email.

    html e text só entram quando preenchidos.
    """
    payload: dict[str, Any] = {
        "from": {"email": request.sender},
        "to": [{"email": request.recipient}],
        "subject": request.subject,
    }
    if request.html:
        payload["html"] = request.html
    if request.text:
        payload["text"] = request.text
    return payload
