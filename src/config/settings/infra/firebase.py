"""Settings do Firebase (Firestore + Auth).

Credenciais da service account vêm de variáveis FIREBASE_* individuais,
no mesmo formato do JSON baixado do console.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"
GOOGLE_CERTS_URL = "https://www.googleapis.com/oauth2/v1/certs"
ROBOT_CERT_URL_PREFIX = "https://www.googleapis.com/robot/v1/metadata/x509/"


@dataclass(frozen=True)
class FirebaseSettings:
    """Configurações do Firebase.

    Attributes:
        project_id: ID do projeto Firebase/GCP
        private_key: Chave privada PEM (aceita "\\n" escapado)
        private_key_id: ID da chave privada
        client_email: Email da service account
        client_id: Client ID da service account
        payments_collection: Collection dos registros de pagamento
    """

    project_id: str = ""
    private_key: str = ""
    private_key_id: str = ""
    client_email: str = ""
    client_id: str = ""
    payments_collection: str = "payments"

    @property
    def enabled(self) -> bool:
        """True se as credenciais mínimas estão presentes."""
        return bool(self.project_id and self.private_key)

    def service_account_info(self) -> dict[str, Any]:
        """Monta o dict de service account esperado pelo google-auth."""
        return {
            "type": "service_account",
            "project_id": self.project_id,
            "private_key_id": self.private_key_id,
            "private_key": self.private_key.replace("\\n", "\n"),
            "client_email": self.client_email,
            "client_id": self.client_id,
            "auth_uri": GOOGLE_AUTH_URI,
            "token_uri": GOOGLE_TOKEN_URI,
            "auth_provider_x509_cert_url": GOOGLE_CERTS_URL,
            "client_x509_cert_url": f"{ROBOT_CERT_URL_PREFIX}{self.client_email}",
        }

    def validate(self) -> list[str]:
        """Valida configurações do Firebase.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if not self.project_id:
            errors.append("FIREBASE_PROJECT_ID não configurado")
        if not self.private_key:
            errors.append("FIREBASE_PRIVATE_KEY não configurado")
        if self.enabled and not self.client_email:
            errors.append("FIREBASE_CLIENT_EMAIL obrigatório quando Firebase está habilitado")
        return errors


def _load_firebase_from_env() -> FirebaseSettings:
    """Carrega FirebaseSettings de variáveis de ambiente."""
    return FirebaseSettings(
        project_id=os.getenv("FIREBASE_PROJECT_ID", ""),
        private_key=os.getenv("FIREBASE_PRIVATE_KEY", ""),
        private_key_id=os.getenv("FIREBASE_PRIVATE_KEY_ID", ""),
        client_email=os.getenv("FIREBASE_CLIENT_EMAIL", ""),
        client_id=os.getenv("FIREBASE_CLIENT_ID", ""),
        payments_collection=os.getenv("FIREBASE_PAYMENTS_COLLECTION", "payments"),
    )


@lru_cache(maxsize=1)
def get_firebase_settings() -> FirebaseSettings:
    """Retorna instância cacheada de FirebaseSettings."""
    return _load_firebase_from_env()
