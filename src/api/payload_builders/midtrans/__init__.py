"""Payload builders para o gateway Midtrans."""

from .snap import build_basic_auth_header, build_snap_transaction_payload

__all__ = ["build_basic_auth_header", "build_snap_transaction_payload"]
