"""Agregador de settings do payment backend.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Email (MailerSend)
from config.settings.email import (
    MAILERSEND_API_URL,
    EmailSettings,
    get_email_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirebaseSettings,
    get_firebase_settings,
)

# Gateway de pagamento (Midtrans)
from config.settings.midtrans import (
    MidtransSettings,
    get_midtrans_settings,
)

__all__ = [
    # Constants
    "MAILERSEND_API_URL",
    # Base
    "BaseSettings",
    # Integrations
    "EmailSettings",
    "Environment",
    # Infrastructure
    "FirebaseSettings",
    "MidtransSettings",
    "get_base_settings",
    "get_email_settings",
    "get_firebase_settings",
    "get_midtrans_settings",
]
