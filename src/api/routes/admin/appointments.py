"""Endpoints de consultas (painel do profissional)."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_booking_url, get_clock, get_store
from api.routes.admin.schemas import (
    ActionResponse,
    AdminAppointmentPayload,
    DashboardResponse,
    ReadAllResponse,
    ReminderResponse,
    StatusPayload,
)
from app.domain.appointment import AppointmentRecord
from app.domain.errors import AppointmentNotFoundError, PatientNotFoundError
from app.protocols.record_store import RecordStoreProtocol
from app.services.appointment_actions import (
    apply_appointment_action,
    create_admin_appointment,
    reminder_preview,
)
from app.services.dashboard import agenda_for_day, summarize_dashboard
from app.services.messaging_links import AppointmentAction

logger = logging.getLogger(__name__)

router = APIRouter()

StoreDep = Annotated[RecordStoreProtocol, Depends(get_store)]
ClockDep = Annotated[dt.datetime, Depends(get_clock)]


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(store: StoreDep, now: ClockDep) -> DashboardResponse:
    appointments = store.load_appointments()
    summary = summarize_dashboard(appointments, now)
    return DashboardResponse(
        total=summary.total,
        completed=summary.completed,
        unread=summary.unread,
        upcoming=summary.upcoming,
        past=summary.past,
        today=agenda_for_day(appointments, now.date()),
    )


@router.get("/appointments", response_model=list[AppointmentRecord])
def list_appointments(
    store: StoreDep,
    date: Annotated[dt.date | None, Query(description="Filtra por data")] = None,
) -> list[AppointmentRecord]:
    appointments = store.load_appointments()
    if date is not None:
        return agenda_for_day(appointments, date)
    return sorted(appointments, key=lambda a: a.starts_at)


@router.post(
    "/appointments",
    response_model=AppointmentRecord,
    status_code=status.HTTP_201_CREATED,
)
def create_appointment(payload: AdminAppointmentPayload, store: StoreDep) -> AppointmentRecord:
    patient = store.get_patient(payload.patient_id)
    if patient is None:
        raise PatientNotFoundError(payload.patient_id)
    appointment = create_admin_appointment(
        store,
        patient_id=patient.id,
        patient_name=patient.name,
        day=payload.date,
        start=payload.time,
        notes=payload.notes,
    )
    logger.info(
        "admin_appointment_created",
        extra={"component": "admin_api", "appointment_id": appointment.id},
    )
    return appointment


@router.post("/appointments/read-all", response_model=ReadAllResponse)
def mark_all_read(store: StoreDep) -> ReadAllResponse:
    updated = 0
    for appt in store.load_appointments():
        if not appt.read and store.mark_read(appt.id):
            updated += 1
    return ReadAllResponse(updated=updated)


@router.post("/appointments/{appointment_id}/status", response_model=AppointmentRecord)
def update_status(
    appointment_id: str,
    payload: StatusPayload,
    store: StoreDep,
) -> AppointmentRecord:
    if not store.update_status(appointment_id, payload.status):
        raise AppointmentNotFoundError(appointment_id)
    return _get_or_404(store, appointment_id)


@router.post("/appointments/{appointment_id}/read", response_model=AppointmentRecord)
def mark_read(appointment_id: str, store: StoreDep) -> AppointmentRecord:
    if not store.mark_read(appointment_id):
        raise AppointmentNotFoundError(appointment_id)
    return _get_or_404(store, appointment_id)


@router.post("/appointments/{appointment_id}/actions/{action}", response_model=ActionResponse)
def appointment_action(
    appointment_id: str,
    action: AppointmentAction,
    store: StoreDep,
    booking_url: Annotated[str, Depends(get_booking_url)],
) -> ActionResponse:
    outcome = apply_appointment_action(store, appointment_id, action, booking_url=booking_url)
    return ActionResponse(
        appointment_id=outcome.appointment_id,
        action=outcome.action,
        status=outcome.status,
        message_link=outcome.message_link,
    )


@router.get("/appointments/{appointment_id}/reminder", response_model=ReminderResponse)
def appointment_reminder(appointment_id: str, store: StoreDep) -> ReminderResponse:
    preview = reminder_preview(store, appointment_id)
    return ReminderResponse(
        appointment_id=preview.appointment_id,
        enabled=preview.enabled,
        message=preview.message,
        message_link=preview.message_link,
    )


def _get_or_404(store: RecordStoreProtocol, appointment_id: str) -> AppointmentRecord:
    appointment = store.get_appointment(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundError(appointment_id)
    return appointment
