"""Agregador de settings de infraestrutura.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.firebase import (
    FirebaseSettings,
    get_firebase_settings,
)

__all__ = [
    "FirebaseSettings",
    "get_firebase_settings",
]
