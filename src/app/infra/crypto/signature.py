"""Validação de assinatura SHA-512 das notificações do Midtrans.

Algoritmo publicado pelo gateway:
    sha512(order_id + status_code + gross_amount + server_key), hex minúsculo.
Concatenação sem delimitador, nesta ordem exata.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any


def _as_signed_text(value: Any) -> str:
    """Renderiza um campo como o gateway o concatena."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def compute_midtrans_signature(
    order_id: Any,
    status_code: Any,
    gross_amount: Any,
    server_key: str,
) -> str:
    """Calcula a assinatura esperada (hex minúsculo, 128 caracteres)."""
    raw = (
        _as_signed_text(order_id)
        + _as_signed_text(status_code)
        + _as_signed_text(gross_amount)
        + server_key
    )
    return hashlib.sha512(raw.encode("utf-8")).hexdigest()


def verify_midtrans_signature(
    order_id: Any,
    status_code: Any,
    gross_amount: Any,
    signature_key: str,
    server_key: str,
) -> bool:
    """Valida signature_key de uma notificação.

    Args:
        order_id: ID do pedido
        status_code: Código de status HTTP informado na notificação
        gross_amount: Valor bruto, exatamente como recebido
        signature_key: Assinatura enviada pelo gateway
        server_key: Server key compartilhada

    Returns:
        True se assinatura válida
    """
    if not signature_key or not server_key:
        return False
    expected = compute_midtrans_signature(order_id, status_code, gross_amount, server_key)
    return hmac.compare_digest(expected.encode("ascii"), signature_key.encode("utf-8"))
