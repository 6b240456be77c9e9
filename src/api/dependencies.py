"""Dependências injetadas nas rotas (sobrescritas nos testes).

Único ponto que lê o relógio: o restante do código recebe o instante de
referência como parâmetro.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from app.bootstrap import get_assistant_client, get_record_store
from config.settings import get_booking_settings

if TYPE_CHECKING:
    from app.protocols.assistant import AssistantProtocol
    from app.protocols.record_store import RecordStoreProtocol


def get_store() -> RecordStoreProtocol:
    return get_record_store()


def get_assistant() -> AssistantProtocol:
    return get_assistant_client()


def get_clock() -> datetime:
    """Horário local de parede (naive)."""
    return datetime.now().replace(second=0, microsecond=0)


def get_booking_url() -> str:
    return get_booking_settings().public_booking_url
