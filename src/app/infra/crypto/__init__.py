"""Criptografia de integração com o gateway de pagamento.

Localizado em app/infra/ para que use cases em app/ validem notificações
sem depender da camada api/.
"""

from .signature import compute_midtrans_signature, verify_midtrans_signature

__all__ = [
    "compute_midtrans_signature",
    "verify_midtrans_signature",
]
