"""Protocolo do provedor de identidade (Firebase Auth)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.accounts import IdentityUser

USER_NOT_FOUND = "auth/user-not-found"
INVALID_EMAIL = "auth/invalid-email"
WEAK_PASSWORD = "auth/weak-password"
INTERNAL_ERROR = "auth/internal-error"


class IdentityProviderError(Exception):
    """Erro do provedor com código no formato `auth/<motivo>`."""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or code)
        self.code = code


class IdentityProviderProtocol(Protocol):
    """Contrato para consulta de usuário e troca de senha."""

    async def get_user_by_email(self, email: str) -> IdentityUser | None:
        """Busca usuário pelo email; None se não existir."""
        ...

    async def update_password(self, uid: str, new_password: str) -> None:
        """Define nova senha; levanta IdentityProviderError em rejeição."""
        ...
