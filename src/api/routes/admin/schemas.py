"""Schemas HTTP do painel administrativo."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from app.domain.appointment import (  # noqa: TC001 - usado em runtime pelo Pydantic
    AppointmentRecord,
    AppointmentStatus,
)
from app.protocols.assistant import CommandAction  # noqa: TC001
from app.services.messaging_links import AppointmentAction  # noqa: TC001


class DashboardResponse(BaseModel):
    total: int
    completed: int
    unread: list[AppointmentRecord]
    upcoming: list[AppointmentRecord]
    past: list[AppointmentRecord]
    today: list[AppointmentRecord]


class AdminAppointmentPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    patient_id: str = Field(..., min_length=1)
    date: dt.date
    time: dt.time
    notes: str = ""


class StatusPayload(BaseModel):
    status: AppointmentStatus


class ReadAllResponse(BaseModel):
    updated: int


class ActionResponse(BaseModel):
    appointment_id: str
    action: AppointmentAction
    status: AppointmentStatus
    message_link: str


class ReminderResponse(BaseModel):
    appointment_id: str
    enabled: bool
    message: str
    message_link: str | None = None


class PatientPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    email: str = ""
    phone: str = ""
    avatar_url: str | None = None


class NotePayload(BaseModel):
    content: str = Field(..., min_length=1)
    sentiment: str | None = None


class SummaryResponse(BaseModel):
    summary: str


class CommandPayload(BaseModel):
    message: str = Field(..., min_length=1)


class CommandResponse(BaseModel):
    action: CommandAction
    reply: str
    appointment_id: str | None = None
    message_link: str | None = None
    error: str | None = None
