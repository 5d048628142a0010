"""Contratos de entrada de email (OTP) e de conta (reset de senha)."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

# Forma mínima "algo@algo.algo", sem espaços
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 6


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


class OtpEmailRequest(BaseModel):
    """Email de OTP a repassar ao provedor."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sender: str = Field(..., alias="from")
    recipient: str = Field(..., alias="to")
    subject: str
    text: str | None = None
    html: str | None = None

    @property
    def has_content(self) -> bool:
        return bool(self.text or self.html)


class PasswordResetRequest(BaseModel):
    """Troca de senha de um usuário do provedor de identidade."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    email: str
    new_password: str = Field(..., alias="newPassword")


class IdentityUser(BaseModel):
    """Usuário retornado pelo provedor de identidade."""

    model_config = ConfigDict(extra="ignore")

    uid: str
    email: str | None = None
