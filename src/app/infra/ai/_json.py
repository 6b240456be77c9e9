"""Extração de JSON de respostas de LLM.

O modelo às vezes devolve o objeto dentro de bloco markdown ou com texto
em volta, mesmo com `response_format=json_object`.
"""

from __future__ import annotations

import json
import re
from typing import Any

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def parse_json_object(content: str | None) -> dict[str, Any] | None:
    """Retorna o primeiro objeto JSON encontrado em `content`, ou None."""
    if not content or not isinstance(content, str):
        return None

    text = _FENCE.sub("", content.strip()).strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = _OBJECT.search(text)
        if match is None:
            return None
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None

    return data if isinstance(data, dict) else None
