"""Settings específicas do gateway Midtrans.

Snap (checkout hospedado) e Core API (consulta de status).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Hosts do gateway por ambiente
SNAP_SANDBOX_URL: str = "https://app.sandbox.midtrans.com/snap/v1/transactions"
SNAP_PRODUCTION_URL: str = "https://app.midtrans.com/snap/v1/transactions"
CORE_API_SANDBOX_URL: str = "https://api.sandbox.midtrans.com"
CORE_API_PRODUCTION_URL: str = "https://api.midtrans.com"


@dataclass(frozen=True)
class MidtransSettings:
    """Configurações do gateway de pagamento.

    Attributes:
        server_key: Server key (Basic auth e assinatura de webhook)
        is_production: Usa hosts de produção em vez do sandbox
        token_timeout_seconds: Timeout da geração de Snap token
        status_timeout_seconds: Timeout da consulta de status
    """

    server_key: str = ""
    is_production: bool = False
    token_timeout_seconds: float = 30.0
    status_timeout_seconds: float = 10.0

    @property
    def enabled(self) -> bool:
        """True se a server key está presente."""
        return bool(self.server_key)

    @property
    def snap_url(self) -> str:
        return SNAP_PRODUCTION_URL if self.is_production else SNAP_SANDBOX_URL

    @property
    def core_api_url(self) -> str:
        return CORE_API_PRODUCTION_URL if self.is_production else CORE_API_SANDBOX_URL

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Midtrans."""
        errors: list[str] = []
        if not self.server_key:
            errors.append("MIDTRANS_SERVER_KEY não configurado")
        elif self.is_production and self.server_key.startswith("SB-"):
            errors.append("MIDTRANS_SERVER_KEY de sandbox com MIDTRANS_IS_PRODUCTION=true")
        return errors


def _load_from_env() -> MidtransSettings:
    """Carrega MidtransSettings de variáveis de ambiente."""
    return MidtransSettings(
        server_key=os.getenv("MIDTRANS_SERVER_KEY", ""),
        is_production=os.getenv("MIDTRANS_IS_PRODUCTION", "false").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_midtrans_settings() -> MidtransSettings:
    """Retorna instância cacheada de MidtransSettings."""
    return _load_from_env()
