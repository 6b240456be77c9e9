"""Modelos de dominio de consultas agendadas.

Esses contratos ficam no dominio para compartilhar dados entre servicos
sem acoplar regras de negocio ao backend de persistencia.
"""

from __future__ import annotations

import datetime as dt
from enum import StrEnum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# Paciente sem cadastro completo (agendamento pela pagina publica).
GUEST_PATIENT_ID = "guest"


class AppointmentStatus(StrEnum):
    """Status de uma consulta (valores persistidos em pt-BR)."""

    SCHEDULED = "Agendado"
    CONFIRMED = "Confirmado"
    COMPLETED = "Realizado"
    CANCELLED = "Cancelado"


def new_appointment_id() -> str:
    """Gera identificador curto e unico para uma consulta."""
    return uuid4().hex[:12]


class AppointmentRecord(BaseModel):
    """Consulta persistida, criada por uma reserva validada."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=new_appointment_id, description="Identificador imutavel.")
    patient_id: str = Field(
        default=GUEST_PATIENT_ID,
        description="Paciente cadastrado ou sentinela 'guest'.",
    )
    patient_name: str = Field(..., description="Nome exibido na agenda.")
    date: dt.date = Field(..., description="Data da consulta (YYYY-MM-DD, horario local).")
    time: dt.time = Field(..., description="Horario de inicio (HH:MM, horario local).")
    status: AppointmentStatus = Field(default=AppointmentStatus.SCHEDULED)
    contact_notes: str = Field(
        default="",
        description="Contato de pacientes sem cadastro ou anotacao do profissional.",
    )
    read: bool = Field(
        default=False,
        description="Notificacao ja vista pelo profissional.",
    )

    @field_serializer("time")
    def _serialize_time(self, value: dt.time) -> str:
        return value.strftime("%H:%M")

    @property
    def starts_at(self) -> dt.datetime:
        return dt.datetime.combine(self.date, self.time)

    @property
    def is_guest(self) -> bool:
        return self.patient_id == GUEST_PATIENT_ID


__all__ = [
    "GUEST_PATIENT_ID",
    "AppointmentRecord",
    "AppointmentStatus",
    "new_appointment_id",
]
