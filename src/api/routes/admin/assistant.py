"""Endpoint de comandos livres para o assistente da agenda."""

from __future__ import annotations

import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_assistant, get_booking_url, get_clock, get_store
from api.routes.admin.schemas import CommandPayload, CommandResponse
from app.protocols.assistant import AssistantProtocol
from app.protocols.record_store import RecordStoreProtocol
from app.services.appointment_actions import handle_assistant_command

router = APIRouter()


@router.post("/commands", response_model=CommandResponse)
async def assistant_command(
    payload: CommandPayload,
    store: Annotated[RecordStoreProtocol, Depends(get_store)],
    assistant: Annotated[AssistantProtocol, Depends(get_assistant)],
    now: Annotated[dt.datetime, Depends(get_clock)],
    booking_url: Annotated[str, Depends(get_booking_url)],
) -> CommandResponse:
    result = await handle_assistant_command(
        store,
        assistant,
        payload.message,
        now,
        booking_url=booking_url,
    )
    return CommandResponse(
        action=result.command.action,
        reply=result.command.reply,
        appointment_id=result.command.appointment_id,
        message_link=result.outcome.message_link if result.outcome else None,
        error=result.error,
    )
