"""Use cases de conta (provedor de identidade)."""

from .reset_password import ResetPasswordUseCase

__all__ = ["ResetPasswordUseCase"]
