"""Validação de presença de campos obrigatórios (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def is_missing(value: Any) -> bool:
    """None, string vazia e coleções vazias contam como ausentes.

    0 e False são valores presentes.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def find_missing_fields(data: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    """Retorna os campos ausentes, na ordem em que foram exigidos."""
    return [name for name in required if is_missing(data.get(name))]


def missing_fields_message(missing: Sequence[str]) -> str:
    return f"Missing required fields: {', '.join(missing)}"
