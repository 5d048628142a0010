"""Payload builders para Email (MailerSend)."""

from .otp import build_otp_email_payload

__all__ = ["build_otp_email_payload"]
