"""Testes da extração de JSON das respostas do modelo."""

from __future__ import annotations

import pytest

from app.infra.ai._json import parse_json_object


@pytest.mark.parametrize(
    "content",
    [
        '{"action": "CONFIRM"}',
        '```json\n{"action": "CONFIRM"}\n```',
        'Claro! {"action": "CONFIRM"} Posso ajudar em algo mais?',
    ],
)
def test_extracts_object(content: str) -> None:
    assert parse_json_object(content) == {"action": "CONFIRM"}


@pytest.mark.parametrize("content", [None, "", "sem json", "[1, 2]", "{quebrado"])
def test_returns_none_when_missing(content: str | None) -> None:
    assert parse_json_object(content) is None
