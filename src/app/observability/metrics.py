"""Métricas via log estruturado.

Cada métrica é uma linha JSON com `metric_type`; a agregação fica a cargo
do coletor de logs.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Registra latência de operação (ex.: request HTTP, chamada ao assistente)."""
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_token_usage(
    component: str,
    operation: str,
    prompt_tokens: int,
    completion_tokens: int,
) -> None:
    """Registra uso de tokens do assistente (custo)."""
    logger.info(
        "metric_token_usage",
        extra={
            "metric_type": "token_usage",
            "component": component,
            "operation": operation,
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": prompt_tokens + completion_tokens,
        },
    )
