"""Connector MailerSend — envio de email transacional via API HTTP."""

from .client import MailerSendClient

__all__ = ["MailerSendClient"]
