"""Client concreto do Firebase Auth usando a Identity Toolkit API v1."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.domain.accounts import IdentityUser
from app.protocols.identity_provider import (
    INTERNAL_ERROR,
    INVALID_EMAIL,
    USER_NOT_FOUND,
    WEAK_PASSWORD,
    IdentityProviderError,
    IdentityProviderProtocol,
)

logger = logging.getLogger(__name__)

_COMPONENT = "google_identity_client"
_IDENTITY_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

# Mensagens da Identity Toolkit -> códigos no formato do Firebase Admin
_ERROR_CODES = {
    "USER_NOT_FOUND": USER_NOT_FOUND,
    "EMAIL_NOT_FOUND": USER_NOT_FOUND,
    "INVALID_EMAIL": INVALID_EMAIL,
    "WEAK_PASSWORD": WEAK_PASSWORD,
}


class GoogleIdentityClient(IdentityProviderProtocol):
    """Implementação do protocolo de identidade sobre projects.accounts."""

    __slots__ = ("_project_id", "_service")

    def __init__(
        self,
        *,
        project_id: str,
        service_account_info: dict[str, Any] | None = None,
        service: Any = None,
    ) -> None:
        if service is None:
            credentials = service_account.Credentials.from_service_account_info(
                service_account_info or {},
                scopes=[_IDENTITY_SCOPE],
            )
            service = build("identitytoolkit", "v1", credentials=credentials, cache_discovery=False)
        self._project_id = project_id
        self._service = service

    async def get_user_by_email(self, email: str) -> IdentityUser | None:
        response = await asyncio.to_thread(self._lookup_sync, email)
        users = response.get("users") or []
        if not users:
            return None
        first = users[0]
        return IdentityUser(uid=first["localId"], email=first.get("email"))

    async def update_password(self, uid: str, new_password: str) -> None:
        await asyncio.to_thread(self._update_sync, uid, new_password)
        logger.info("identity_password_updated", extra={"component": _COMPONENT})

    def _lookup_sync(self, email: str) -> dict[str, Any]:
        request = self._service.projects().accounts().lookup(
            targetProjectId=self._project_id,
            body={"email": [email]},
        )
        return self._execute(request, action="lookup")

    def _update_sync(self, uid: str, new_password: str) -> dict[str, Any]:
        request = self._service.projects().accounts().update(
            targetProjectId=self._project_id,
            body={"localId": uid, "password": new_password},
        )
        return self._execute(request, action="update")

    def _execute(self, request: Any, *, action: str) -> dict[str, Any]:
        try:
            return request.execute() or {}
        except HttpError as exc:
            code = error_code_from_http_error(exc)
            logger.warning(
                "identity_request_failed",
                extra={"component": _COMPONENT, "action": action, "error_code": code},
            )
            raise IdentityProviderError(code, str(exc)) from exc
        except (GoogleAuthError, OSError) as exc:
            # Credencial, DNS ou timeout: sem código mapeado
            logger.warning(
                "identity_request_failed",
                extra={
                    "component": _COMPONENT,
                    "action": action,
                    "error_code": INTERNAL_ERROR,
                    "error_type": type(exc).__name__,
                },
            )
            raise IdentityProviderError(INTERNAL_ERROR, str(exc)) from exc


def error_code_from_http_error(exc: HttpError) -> str:
    """Extrai o código de erro (`auth/...`) do corpo de um HttpError."""
    try:
        body = json.loads(exc.content.decode("utf-8"))
        message = str(body.get("error", {}).get("message", ""))
    except (ValueError, AttributeError):
        return INTERNAL_ERROR
    # Ex.: "WEAK_PASSWORD : Password should be at least 6 characters"
    reason = message.split(":", 1)[0].strip()
    return _ERROR_CODES.get(reason, INTERNAL_ERROR)
