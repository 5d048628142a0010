"""Settings base do payment backend.

Configurações comuns ao serviço: ambiente, porta, logging e CORS.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 3000
WILDCARD_ORIGIN = "*"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        port: Porta HTTP de escuta
        log_level: Nível de log do root logger
        cors_allow_origins: Origens aceitas pelo CORS ("*" = qualquer)
        cors_allow_credentials: Permite cookies/credenciais cross-origin
    """

    environment: Environment = "development"
    service_name: str = "payment-backend"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    # CORS permissivo por padrão (comportamento herdado do frontend atual)
    cors_allow_origins: tuple[str, ...] = (WILDCARD_ORIGIN,)
    cors_allow_credentials: bool = True

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def cors_is_permissive(self) -> bool:
        """True quando qualquer origem é aceita junto com credenciais."""
        return WILDCARD_ORIGIN in self.cors_allow_origins and self.cors_allow_credentials

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo válido: {self.port}")

        if not self.cors_allow_origins:
            errors.append("CORS_ALLOW_ORIGINS não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return -1


def _parse_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "payment-backend"),
        port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", WILDCARD_ORIGIN)),
        cors_allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
