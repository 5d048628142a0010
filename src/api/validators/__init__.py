"""Validators da borda — presença de campos obrigatórios nos corpos.

Validação de formato fica nos modelos pydantic de app/domain.
"""

from .required_fields import find_missing_fields, is_missing, missing_fields_message

__all__ = [
    "find_missing_fields",
    "is_missing",
    "missing_fields_message",
]
