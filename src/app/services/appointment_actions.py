"""Acoes administrativas sobre consultas (confirmar, cancelar, remarcar).

Usado pelo painel e pelo assistente de comandos. Cada acao devolve o link
de mensagem para o paciente; confirmar/cancelar tambem atualizam o status.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.appointment import AppointmentRecord, AppointmentStatus
from app.domain.errors import AppointmentNotFoundError, ContactPhoneNotFoundError
from app.protocols.assistant import CommandAction
from app.services.messaging_links import (
    AppointmentAction,
    build_action_message,
    build_whatsapp_link,
    resolve_contact_phone,
)

if TYPE_CHECKING:
    from datetime import date, datetime, time

    from app.protocols.assistant import AssistantCommand, AssistantProtocol
    from app.protocols.record_store import RecordStoreProtocol

logger = logging.getLogger(__name__)

_STATUS_BY_ACTION = {
    AppointmentAction.CONFIRM: AppointmentStatus.CONFIRMED,
    AppointmentAction.CANCEL: AppointmentStatus.CANCELLED,
}

_ACTION_BY_COMMAND = {
    CommandAction.CONFIRM: AppointmentAction.CONFIRM,
    CommandAction.CANCEL: AppointmentAction.CANCEL,
    CommandAction.RESCHEDULE_LINK: AppointmentAction.RESCHEDULE,
}


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    appointment_id: str
    action: AppointmentAction
    status: AppointmentStatus
    message_link: str


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    command: AssistantCommand
    outcome: ActionOutcome | None = None
    error: str | None = None


def apply_appointment_action(
    store: RecordStoreProtocol,
    appointment_id: str,
    action: AppointmentAction,
    *,
    booking_url: str = "",
) -> ActionOutcome:
    """Executa a acao e devolve o link de mensagem.

    Raises:
        AppointmentNotFoundError: consulta inexistente.
        ContactPhoneNotFoundError: sem telefone conhecido (nada e alterado).
    """
    appointment = store.get_appointment(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundError(appointment_id)

    patient = store.get_patient(appointment.patient_id)
    phone = resolve_contact_phone(appointment, patient)
    if not phone:
        raise ContactPhoneNotFoundError(appointment.patient_name)

    status = appointment.status
    new_status = _STATUS_BY_ACTION.get(action)
    if new_status is not None:
        store.update_status(appointment.id, new_status)
        status = new_status

    message = build_action_message(action, appointment, booking_url=booking_url)
    logger.info(
        "appointment_action_applied",
        extra={
            "component": "appointment_actions",
            "action": str(action),
            "appointment_id": appointment.id,
            "status": str(status),
        },
    )
    return ActionOutcome(
        appointment_id=appointment.id,
        action=action,
        status=status,
        message_link=build_whatsapp_link(phone, message),
    )


async def handle_assistant_command(
    store: RecordStoreProtocol,
    assistant: AssistantProtocol,
    message: str,
    reference_instant: datetime,
    *,
    booking_url: str = "",
) -> CommandOutcome:
    """Interpreta um comando livre e executa a acao identificada.

    O store e sincrono: leitura e acao rodam fora do event loop.
    """
    appointments = await asyncio.to_thread(store.load_appointments)
    command = await assistant.interpret_command(message, appointments, reference_instant)

    action = _ACTION_BY_COMMAND.get(command.action)
    if action is None or not command.appointment_id:
        return CommandOutcome(command=command)

    try:
        outcome = await asyncio.to_thread(
            apply_appointment_action,
            store,
            command.appointment_id,
            action,
            booking_url=booking_url,
        )
    except (AppointmentNotFoundError, ContactPhoneNotFoundError) as exc:
        logger.warning(
            "assistant_command_not_applied",
            extra={"component": "appointment_actions", "error_type": type(exc).__name__},
        )
        return CommandOutcome(command=command, error=str(exc))
    return CommandOutcome(command=command, outcome=outcome)


def create_admin_appointment(
    store: RecordStoreProtocol,
    *,
    patient_id: str,
    patient_name: str,
    day: date,
    start: time,
    notes: str = "",
) -> AppointmentRecord:
    """Consulta criada pelo proprio profissional (ja marcada como lida)."""
    appointment = AppointmentRecord(
        patient_id=patient_id,
        patient_name=patient_name,
        date=day,
        time=start,
        status=AppointmentStatus.SCHEDULED,
        contact_notes=notes,
        read=True,
    )
    store.append_appointment(appointment)
    return appointment


@dataclass(frozen=True, slots=True)
class ReminderPreview:
    appointment_id: str
    enabled: bool
    message: str
    message_link: str | None


def reminder_preview(store: RecordStoreProtocol, appointment_id: str) -> ReminderPreview:
    """Lembrete renderizado com o template atual (mesmo se desativado)."""
    appointment = store.get_appointment(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundError(appointment_id)

    reminder = store.load_settings().reminder
    message = reminder.render(appointment)
    phone = resolve_contact_phone(appointment, store.get_patient(appointment.patient_id))
    return ReminderPreview(
        appointment_id=appointment.id,
        enabled=reminder.enabled,
        message=message,
        message_link=build_whatsapp_link(phone, message) if phone else None,
    )
