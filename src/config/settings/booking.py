"""Settings do fluxo publico de agendamento.

O link publico e usado nas mensagens de remarcacao enviadas ao paciente.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class BookingSettings(BaseModel):
    """Configuracoes do agendamento publico."""

    model_config = ConfigDict(extra="ignore")

    public_booking_url: str = Field(
        default="http://localhost:8000/booking",
        description="URL publica do formulario de agendamento.",
    )
    cors_allowed_origins: list[str] = Field(
        default_factory=list,
        description="Origens liberadas para o frontend publico.",
    )


def _parse_origins(value: str) -> list[str]:
    """Lista separada por virgula, ignorando itens vazios."""
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_booking_from_env() -> BookingSettings:
    """Carrega BookingSettings a partir de variaveis de ambiente."""
    return BookingSettings(
        public_booking_url=os.getenv("PUBLIC_BOOKING_URL", "http://localhost:8000/booking"),
        cors_allowed_origins=_parse_origins(os.getenv("CORS_ALLOWED_ORIGINS", "")),
    )


@lru_cache(maxsize=1)
def get_booking_settings() -> BookingSettings:
    """Retorna instancia cacheada de BookingSettings."""
    return _load_booking_from_env()


__all__ = ["BookingSettings", "get_booking_settings"]
