"""Factories de clientes externos — Firestore e Identity Toolkit.

Ambos usam a mesma service account montada a partir de FIREBASE_*.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from app.infra.identity import GoogleIdentityClient
    from config.settings import FirebaseSettings

logger = logging.getLogger(__name__)

_DATASTORE_SCOPE = "https://www.googleapis.com/auth/datastore"


def create_firestore_client(settings: FirebaseSettings) -> FirestoreClient:
    """Cria cliente Firestore autenticado pela service account.

    Raises:
        ValueError: Se a chave privada for inválida
    """
    from google.cloud import firestore
    from google.oauth2 import service_account

    credentials = service_account.Credentials.from_service_account_info(
        settings.service_account_info(),
        scopes=[_DATASTORE_SCOPE],
    )
    client = firestore.Client(project=settings.project_id, credentials=credentials)
    logger.info("firestore_client_created", extra={"project": settings.project_id})
    return client


def create_identity_client(settings: FirebaseSettings) -> GoogleIdentityClient:
    """Cria client do Firebase Auth (Identity Toolkit v1)."""
    from app.infra.identity import GoogleIdentityClient

    client = GoogleIdentityClient(
        project_id=settings.project_id,
        service_account_info=settings.service_account_info(),
    )
    logger.info("identity_client_created", extra={"project": settings.project_id})
    return client
