"""Connector Midtrans — Snap token e Core API de status."""

from .client import MidtransClient

__all__ = ["MidtransClient"]
