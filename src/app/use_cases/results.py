"""Resultados explícitos dos use cases.

Use cases não levantam exceção para falhas esperadas: retornam Success ou
Failure, e a camada api traduz `Failure.kind` em status HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

FailureKind = Literal[
    "invalid_input",
    "not_configured",
    "upstream_error",
    "not_found",
    "rejected",
]


@dataclass(frozen=True, slots=True)
class Success:
    """Resultado de sucesso; `ok` vira o campo `success` do envelope."""

    data: dict[str, Any] = field(default_factory=dict)
    ok: bool = True


@dataclass(frozen=True, slots=True)
class Failure:
    """Falha esperada de um use case.

    Attributes:
        kind: Categoria (define o status HTTP)
        message: Mensagem pública
        error: Payload de erro do provedor, quando seguro expor
        error_code: Código do provedor (ex.: auth/user-not-found)
        details: Campos extras do envelope (ex.: order_id)
    """

    kind: FailureKind
    message: str
    error: Any = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


UseCaseResult = Success | Failure
