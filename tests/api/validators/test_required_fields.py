"""Testes da checagem de campos obrigatórios."""

from __future__ import annotations

import pytest

from api.validators.required_fields import find_missing_fields, is_missing, missing_fields_message


@pytest.mark.parametrize("value", [None, "", [], {}, ()])
def test_empty_values_are_missing(value) -> None:
    assert is_missing(value) is True


@pytest.mark.parametrize("value", [0, False, "x", [1], {"a": 1}, 0.0])
def test_falsy_scalars_are_present(value) -> None:
    assert is_missing(value) is False


def test_find_missing_fields_keeps_required_order() -> None:
    data = {"to": "user@example.com", "subject": ""}

    assert find_missing_fields(data, ("from", "to", "subject")) == ["from", "subject"]


def test_missing_fields_message() -> None:
    assert missing_fields_message(["from", "subject"]) == "Missing required fields: from, subject"
