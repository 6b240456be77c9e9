"""Modelos de configuracao da agenda do profissional.

A regra semanal (AvailabilityRule) e a politica de agendamento
(SchedulingPolicy) sao lidas pelo nucleo de slots como valores imutaveis.
A unica etapa que valida consistencia entre campos e a construcao de
ProfessionalSettings, executada ao salvar e ao carregar do store.
"""

from __future__ import annotations

from datetime import time  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

if TYPE_CHECKING:
    from app.domain.appointment import AppointmentRecord

# Duracoes sugeridas pela tela de configuracoes; o nucleo aceita qualquer valor positivo.
SUGGESTED_SLOT_DURATIONS = (30, 45, 50, 60, 90)

DEFAULT_REMINDER_TEMPLATE = (
    "Olá {paciente}, lembrete da sua consulta amanhã às {hora}. Responda para confirmar."
)

# Limites da politica: um ano de antecedencia e de horizonte.
MAX_NOTICE_HOURS = 24 * 365
MAX_FUTURE_DAYS = 365
MAX_LATE_ARRIVAL_MINUTES = 120

_MIN_WEEKDAY = 0
_MAX_WEEKDAY = 6


class AvailabilityRule(BaseModel):
    """Agenda semanal recorrente (0 = domingo)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    active_weekdays: tuple[int, ...] = Field(
        default=(1, 2, 3, 4, 5),
        description="Dias da semana com atendimento (0 = domingo ... 6 = sabado).",
    )
    daily_start: time = Field(..., description="Inicio do expediente (HH:MM).")
    daily_end: time = Field(..., description="Fim do expediente (HH:MM).")
    slot_duration_minutes: int = Field(..., gt=0, description="Duracao de cada slot.")

    @field_validator("active_weekdays", mode="before")
    @classmethod
    def _normalize_weekdays(cls, value: Any) -> tuple[int, ...]:
        days = sorted({int(day) for day in value or ()})
        invalid = [day for day in days if not _MIN_WEEKDAY <= day <= _MAX_WEEKDAY]
        if invalid:
            msg = f"Dia da semana inválido: {invalid} (use 0-6, 0 = domingo)"
            raise ValueError(msg)
        return tuple(days)

    @field_serializer("daily_start", "daily_end")
    def _serialize_time(self, value: time) -> str:
        return value.strftime("%H:%M")

    @model_validator(mode="after")
    def _check_daily_window(self) -> AvailabilityRule:
        if not self.has_valid_window:
            msg = "Horário de início deve ser anterior ao horário de término"
            raise ValueError(msg)
        return self

    @property
    def has_valid_window(self) -> bool:
        return self.daily_start < self.daily_end


class SchedulingPolicy(BaseModel):
    """Restricoes de antecedencia e horizonte para o agendamento publico."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    min_notice_hours: float = Field(
        default=2,
        ge=0,
        le=MAX_NOTICE_HOURS,
        description="Antecedencia minima entre agora e o inicio do slot.",
    )
    max_future_days: int = Field(
        default=30,
        gt=0,
        le=MAX_FUTURE_DAYS,
        description="Quantidade de dias futuros oferecidos (hoje excluido).",
    )
    late_arrival_tolerance_minutes: float = Field(
        default=15,
        ge=0,
        le=MAX_LATE_ARRIVAL_MINUTES,
        description="Tolerancia de atraso exibida ao paciente. Nao afeta slots.",
    )


class ReminderConfig(BaseModel):
    """Configuracao de lembretes enviados ao paciente."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    enabled: bool = Field(default=False, description="Lembretes habilitados.")
    time_before_hours: int = Field(
        default=24,
        ge=0,
        description="Quantas horas antes da consulta o lembrete e enviado.",
    )
    message_template: str = Field(
        default=DEFAULT_REMINDER_TEMPLATE,
        description="Template com marcadores {paciente}, {hora} e {data}.",
    )

    def render(self, appointment: AppointmentRecord) -> str:
        """Substitui os marcadores do template pelos dados da consulta."""
        return (
            self.message_template.replace("{paciente}", appointment.patient_name)
            .replace("{hora}", appointment.time.strftime("%H:%M"))
            .replace("{data}", appointment.date.strftime("%d/%m/%Y"))
        )


class ProfileInfo(BaseModel):
    """Dados publicos do profissional exibidos na pagina de agendamento."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    specialty: str = ""
    bio: str = ""
    avatar_url: str = ""
    email: str = ""


class ProfessionalSettings(BaseModel):
    """Configuracao completa e validada do profissional.

    Construir este modelo e o passo unico de validacao: depois dele o
    restante do codigo nunca verifica subcampos ausentes.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    profile: ProfileInfo = Field(default_factory=ProfileInfo)
    availability: AvailabilityRule
    scheduling: SchedulingPolicy = Field(default_factory=SchedulingPolicy)
    reminder: ReminderConfig = Field(default_factory=ReminderConfig)


DEFAULT_PROFESSIONAL_SETTINGS = ProfessionalSettings(
    profile=ProfileInfo(
        name="Dr. Silva",
        specialty="Psicologia Clínica & TCC",
        bio="Especialista em ansiedade e desenvolvimento pessoal com 10 anos de experiência.",
        avatar_url="https://i.pravatar.cc/300?img=11",
        email="contato@drsilva.com",
    ),
    availability=AvailabilityRule(
        active_weekdays=(1, 2, 3, 4, 5),
        daily_start=time(9, 0),
        daily_end=time(18, 0),
        slot_duration_minutes=60,
    ),
    scheduling=SchedulingPolicy(),
    reminder=ReminderConfig(enabled=True),
)


def load_professional_settings(raw: dict[str, Any] | None) -> ProfessionalSettings:
    """Constroi settings a partir do documento salvo, aplicando backfill.

    Documentos antigos podem nao ter os blocos `scheduling`/`reminder`;
    eles recebem defaults fixos em vez de gerar erro. Sem documento salvo,
    retorna os defaults iniciais.
    """
    if not raw:
        return DEFAULT_PROFESSIONAL_SETTINGS
    data = dict(raw)
    if not isinstance(data.get("scheduling"), dict):
        data["scheduling"] = SchedulingPolicy().model_dump()
    if not isinstance(data.get("reminder"), dict):
        data["reminder"] = ReminderConfig().model_dump()
    return ProfessionalSettings.model_validate(data)


__all__ = [
    "DEFAULT_PROFESSIONAL_SETTINGS",
    "DEFAULT_REMINDER_TEMPLATE",
    "MAX_FUTURE_DAYS",
    "MAX_LATE_ARRIVAL_MINUTES",
    "MAX_NOTICE_HOURS",
    "SUGGESTED_SLOT_DURATIONS",
    "AvailabilityRule",
    "ProfessionalSettings",
    "ProfileInfo",
    "ReminderConfig",
    "SchedulingPolicy",
    "load_professional_settings",
]
