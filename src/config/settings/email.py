"""Settings específicas de Email.

Envio transacional (OTP) via API HTTP da MailerSend.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

MAILERSEND_API_URL: str = "https://api.mailersend.com/v1/email"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do provedor de email.

    Attributes:
        api_key: Token Bearer da MailerSend (MAILERSEND_API_KEY)
        api_url: Endpoint de envio
        request_timeout_seconds: Timeout do envio
    """

    api_key: str = ""
    api_url: str = MAILERSEND_API_URL
    request_timeout_seconds: float = 30.0

    @property
    def enabled(self) -> bool:
        """True se a API key está presente."""
        return bool(self.api_key)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Email."""
        errors: list[str] = []
        if not self.api_key:
            errors.append("MAILERSEND_API_KEY não configurado")
        if not self.api_url.startswith("https://"):
            errors.append("MAILERSEND_API_URL deve usar https")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        api_key=os.getenv("MAILERSEND_API_KEY", ""),
        api_url=os.getenv("MAILERSEND_API_URL", MAILERSEND_API_URL),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
