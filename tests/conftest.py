"""Configuração do pytest para o payment backend."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_email_settings,
    get_firebase_settings,
    get_midtrans_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste lê o env de novo."""
    caches = (get_base_settings, get_email_settings, get_firebase_settings, get_midtrans_settings)
    for getter in caches:
        getter.cache_clear()
    yield
    for getter in caches:
        getter.cache_clear()
