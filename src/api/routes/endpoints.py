"""Catálogo de endpoints públicos (exibido em / e no 404)."""

from __future__ import annotations

SERVICE_ENDPOINTS: tuple[str, ...] = (
    "POST /send-otp",
    "POST /reset-password",
    "POST /generate-snap-token",
    "POST /midtrans-webhook",
    "GET /payment-finish",
    "GET /payment-status/:orderId",
    "POST /payment-status",
    "GET /health",
    "GET /ready",
)

AVAILABLE_ENDPOINTS: tuple[str, ...] = ("GET /", *SERVICE_ENDPOINTS)
