"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
]
