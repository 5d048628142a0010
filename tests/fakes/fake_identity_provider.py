"""Fake in-memory do provedor de identidade."""

from __future__ import annotations

from app.domain.accounts import IdentityUser
from app.protocols.identity_provider import IdentityProviderError


class FakeIdentityProvider:
    """Usuários indexados por email; `update_error` simula rejeição."""

    def __init__(
        self,
        users: dict[str, str] | None = None,
        *,
        update_error: str | None = None,
    ) -> None:
        self._uids_by_email = dict(users or {})
        self.passwords: dict[str, str] = {}
        self.update_error = update_error

    async def get_user_by_email(self, email: str) -> IdentityUser | None:
        uid = self._uids_by_email.get(email)
        return IdentityUser(uid=uid, email=email) if uid is not None else None

    async def update_password(self, uid: str, new_password: str) -> None:
        if self.update_error is not None:
            raise IdentityProviderError(self.update_error)
        self.passwords[uid] = new_password
