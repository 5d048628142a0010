"""Exceções de domínio para falhas de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de IO em dependências externas."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de leitura/escrita no Firestore."""
