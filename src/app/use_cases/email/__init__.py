"""Use cases de email transacional."""

from .send_otp import SendOtpEmailUseCase

__all__ = ["SendOtpEmailUseCase"]
