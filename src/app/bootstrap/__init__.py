"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: carrega .env, configura logging,
valida settings e expõe o ServiceContainer com as implementações
concretas conectadas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, build_service_container

    initialize_app()
    container = build_service_container()
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from app.bootstrap.container import RuntimeConfig, ServiceContainer, build_service_container
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_email_settings,
    get_firebase_settings,
    get_midtrans_settings,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação (chamar uma vez, antes de criar o app).

    Configura:
    - Variáveis do arquivo .env (sem sobrescrever o ambiente)
    - Logging estruturado JSON com correlation_id
    """
    load_dotenv(override=False)
    base_settings = get_base_settings()

    configure_logging(
        level=base_settings.log_level,
        service_name=base_settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Integrações ausentes são apenas logadas (cada uma é opcional).
    Valores malformados falham rápido em staging/production.
    """
    base_settings = get_base_settings()
    environment = base_settings.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS

    errors = [f"base: {error}" for error in base_settings.validate()]
    missing: list[str] = []

    for name, settings in (
        ("email", get_email_settings()),
        ("midtrans", get_midtrans_settings()),
        ("firebase", get_firebase_settings()),
    ):
        problems = settings.validate()
        if not settings.enabled:
            missing.append(name)
        else:
            errors.extend(f"{name}: {problem}" for problem in problems)

    if missing:
        logger.warning(
            "integrations_disabled",
            extra={"component": "bootstrap", "integrations": missing},
        )

    if base_settings.cors_is_permissive:
        logger.warning(
            "cors_permissive_policy",
            extra={"component": "bootstrap", "origins": list(base_settings.cors_allow_origins)},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "RuntimeConfig",
    "ServiceContainer",
    "build_service_container",
    "initialize_app",
    "validate_runtime_settings",
]
