"""Endpoints de configuração do profissional."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_store
from app.domain.scheduling import ProfessionalSettings
from app.protocols.record_store import RecordStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

StoreDep = Annotated[RecordStoreProtocol, Depends(get_store)]


@router.get("", response_model=ProfessionalSettings)
def read_settings(store: StoreDep) -> ProfessionalSettings:
    return store.load_settings()


@router.put("", response_model=ProfessionalSettings)
def save_settings(payload: ProfessionalSettings, store: StoreDep) -> ProfessionalSettings:
    """Salva a configuração completa (janela inválida já resulta em 422)."""
    store.save_settings(payload)
    logger.info(
        "settings_saved",
        extra={
            "component": "admin_api",
            "slot_duration_minutes": payload.availability.slot_duration_minutes,
            "active_weekdays": list(payload.availability.active_weekdays),
        },
    )
    return payload
