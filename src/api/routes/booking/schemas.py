"""Schemas HTTP do agendamento público."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from app.domain.scheduling import ProfileInfo  # noqa: TC001 - usado em runtime pelo Pydantic


class BookingProfileResponse(BaseModel):
    profile: ProfileInfo
    slot_duration_minutes: int
    late_arrival_tolerance_minutes: float


class BookableDate(BaseModel):
    date: dt.date
    label: str = Field(..., description="Rótulo curto, ex.: 'Ter, 20 de out'.")


class BookableSlot(BaseModel):
    time: str = Field(..., description="Início do horário (HH:MM).")
    late_arrival_deadline: str | None = Field(
        default=None,
        description="Horário limite de tolerância para atraso (HH:MM).",
    )


class BookableSlotsResponse(BaseModel):
    date: dt.date
    slots: list[BookableSlot]


class BookingPayload(BaseModel):
    """Formulário enviado pelo paciente.

    Campos de contato chegam como texto livre; a validação de conteúdo é
    feita pelo booking_validator para acumular os erros por campo.
    """

    model_config = ConfigDict(extra="ignore")

    date: dt.date
    time: dt.time
    patient_name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: str = ""
