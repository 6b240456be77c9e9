"""Validacao deterministica de uma reserva publica (sem IO).

Todas as verificacoes rodam de forma independente e os erros se acumulam.
A rechecagem temporal usa o "agora" bruto, sem a antecedencia minima: ela
existe para pegar slots que expiraram entre a exibicao da lista e o envio.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.appointment import (
    GUEST_PATIENT_ID,
    AppointmentRecord,
    AppointmentStatus,
    new_appointment_id,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import time

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# DDD de 2 digitos (parenteses opcionais), 4-5 digitos, separador opcional, 4 digitos.
PHONE_PATTERN = re.compile(r"^\(?\d{2}\)?[\s-]?\d{4,5}[\s-]?\d{4}$")

_DOB_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


class BookingErrorKind(StrEnum):
    """Tipos de erro de uma reserva."""

    MISSING_PATIENT_NAME = "missing_patient_name"
    MISSING_EMAIL = "missing_email"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    MISSING_PHONE = "missing_phone"
    INVALID_PHONE_FORMAT = "invalid_phone_format"
    MISSING_DATE_OF_BIRTH = "missing_date_of_birth"
    INVALID_DATE_OF_BIRTH = "invalid_date_of_birth"
    FUTURE_DATE_OF_BIRTH = "future_date_of_birth"
    SLOT_EXPIRED = "slot_expired"


_MESSAGES: dict[BookingErrorKind, str] = {
    BookingErrorKind.MISSING_PATIENT_NAME: "Nome é obrigatório.",
    BookingErrorKind.MISSING_EMAIL: "Email é obrigatório.",
    BookingErrorKind.INVALID_EMAIL_FORMAT: "Digite um email válido.",
    BookingErrorKind.MISSING_PHONE: "Telefone é obrigatório.",
    BookingErrorKind.INVALID_PHONE_FORMAT: "Formato inválido. Use (DD) 99999-9999",
    BookingErrorKind.MISSING_DATE_OF_BIRTH: "Data de nascimento é obrigatória.",
    BookingErrorKind.INVALID_DATE_OF_BIRTH: "Data de nascimento inválida.",
    BookingErrorKind.FUTURE_DATE_OF_BIRTH: "Data inválida (futuro).",
    BookingErrorKind.SLOT_EXPIRED: (
        "O horário selecionado já passou ou expirou. Por favor, escolha um novo horário."
    ),
}


@dataclass(frozen=True, slots=True)
class BookingRequest:
    """Dados enviados pelo formulario publico."""

    date: date
    time: time
    patient_name: str
    email: str
    phone: str
    date_of_birth: str


@dataclass(frozen=True, slots=True)
class FieldError:
    """Erro recuperavel associado a um campo do formulario."""

    field: str
    kind: BookingErrorKind

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind]


@dataclass(frozen=True, slots=True)
class BookingValidationResult:
    """Resultado da validacao: rascunho de consulta ou erros."""

    field_errors: dict[str, FieldError] = field(default_factory=dict)
    form_error: BookingErrorKind | None = None
    appointment: AppointmentRecord | None = None

    @property
    def is_valid(self) -> bool:
        return self.appointment is not None

    @property
    def slot_expired(self) -> bool:
        return self.form_error is BookingErrorKind.SLOT_EXPIRED

    @property
    def form_message(self) -> str | None:
        return _MESSAGES[self.form_error] if self.form_error else None


def validate_booking(
    request: BookingRequest,
    reference_instant: datetime,
    *,
    id_factory: Callable[[], str] = new_appointment_id,
) -> BookingValidationResult:
    """Valida a reserva e, se tudo estiver ok, monta o rascunho da consulta.

    Nao persiste nada: salvar o rascunho e responsabilidade do chamador.
    """
    errors: dict[str, FieldError] = {}
    for error in (
        _check_name(request.patient_name),
        _check_email(request.email),
        _check_phone(request.phone),
    ):
        if error is not None:
            errors[error.field] = error

    birth_date, dob_error = _check_date_of_birth(request.date_of_birth, reference_instant)
    if dob_error is not None:
        errors[dob_error.field] = dob_error

    starts_at = datetime.combine(request.date, request.time)
    form_error = BookingErrorKind.SLOT_EXPIRED if starts_at <= reference_instant else None

    if errors or form_error is not None or birth_date is None:
        return BookingValidationResult(field_errors=errors, form_error=form_error)

    appointment = AppointmentRecord(
        id=id_factory(),
        patient_id=GUEST_PATIENT_ID,
        patient_name=request.patient_name.strip(),
        date=request.date,
        time=request.time,
        status=AppointmentStatus.SCHEDULED,
        contact_notes=build_contact_notes(
            email=request.email.strip(),
            phone=request.phone.strip(),
            date_of_birth=birth_date,
        ),
        read=False,
    )
    return BookingValidationResult(appointment=appointment)


def build_contact_notes(*, email: str, phone: str, date_of_birth: date) -> str:
    """Texto de contato gravado na consulta de quem nao tem cadastro."""
    return f"Contato: {email} | Tel: {phone} | Nascimento: {date_of_birth:%d/%m/%Y}"


def _check_name(value: str) -> FieldError | None:
    if not (value or "").strip():
        return FieldError("patient_name", BookingErrorKind.MISSING_PATIENT_NAME)
    return None


def _check_email(value: str) -> FieldError | None:
    email = (value or "").strip()
    if not email:
        return FieldError("email", BookingErrorKind.MISSING_EMAIL)
    if not EMAIL_PATTERN.match(email):
        return FieldError("email", BookingErrorKind.INVALID_EMAIL_FORMAT)
    return None


def _check_phone(value: str) -> FieldError | None:
    phone = (value or "").strip()
    if not phone:
        return FieldError("phone", BookingErrorKind.MISSING_PHONE)
    if not PHONE_PATTERN.match(phone):
        return FieldError("phone", BookingErrorKind.INVALID_PHONE_FORMAT)
    return None


def _check_date_of_birth(
    value: str,
    reference_instant: datetime,
) -> tuple[date | None, FieldError | None]:
    raw = (value or "").strip()
    if not raw:
        return None, FieldError("date_of_birth", BookingErrorKind.MISSING_DATE_OF_BIRTH)
    parsed = _parse_date(raw)
    if parsed is None:
        return None, FieldError("date_of_birth", BookingErrorKind.INVALID_DATE_OF_BIRTH)
    if parsed > reference_instant.date():
        return None, FieldError("date_of_birth", BookingErrorKind.FUTURE_DATE_OF_BIRTH)
    return parsed, None


def _parse_date(raw: str) -> date | None:
    for fmt in _DOB_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


__all__ = [
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "BookingErrorKind",
    "BookingRequest",
    "BookingValidationResult",
    "FieldError",
    "build_contact_notes",
    "validate_booking",
]
