"""Testes de correlation_id e métricas."""

from __future__ import annotations

import logging

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    record_latency,
    record_token_usage,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("req-123")
    try:
        assert get_correlation_id() == "req-123"
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() == ""


@pytest.mark.parametrize("raw", [None, "", "tem espaço", "x" * 65])
def test_invalid_ids_are_replaced(raw: str | None) -> None:
    token = set_correlation_id(raw)
    try:
        value = get_correlation_id()
        assert value
        assert value != raw
        assert len(value) == 32
    finally:
        reset_correlation_id(token)


def test_generated_ids_are_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


def test_metrics_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_latency("assistant", "summarize_notes", 12.3456)
        record_token_usage("assistant", "summarize_notes", prompt_tokens=100, completion_tokens=20)

    latency, tokens = caplog.records
    assert latency.getMessage() == "metric_latency"
    assert latency.latency_ms == 12.35
    assert tokens.total_tokens == 120
