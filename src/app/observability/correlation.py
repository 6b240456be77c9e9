"""correlation_id por requisição (ContextVar, async-safe).

O middleware HTTP define o valor a partir do header `X-Correlation-ID`
(ou gera um novo) e o filter de logging o injeta em cada record.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "X-Correlation-ID"

# Aceita apenas ids curtos e seguros para log
_VALID_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto (string vazia fora de request)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; valores ausentes ou inválidos geram um novo."""
    value = correlation_id if correlation_id and _VALID_ID.match(correlation_id) else None
    return _correlation_id.set(value or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex
