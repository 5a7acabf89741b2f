"""Testes da máscara de telefone."""

from __future__ import annotations

import pytest

from api.connectors.contact import format_phone_mask


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("abc", "abc"),
        ("-", "-"),
        ("1", "(1"),
        ("11", "(11"),
        ("119", "(11) 9"),
        ("119876", "(11) 9876"),
        ("1198765", "(11) 98765-"),
        ("11987654321", "(11) 98765-4321"),
        ("1198765432199", "(11) 98765-4321"),
        ("(11) 98765-4321", "(11) 98765-4321"),
        ("1133334444", "(11) 33334-444"),
    ],
)
def test_format_phone_mask(raw: str, expected: str) -> None:
    assert format_phone_mask(raw) == expected
