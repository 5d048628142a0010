"""Use cases — um por fluxo de endpoint, sem dependência da camada api."""

from .results import Failure, FailureKind, Success, UseCaseResult

__all__ = [
    "Failure",
    "FailureKind",
    "Success",
    "UseCaseResult",
]
