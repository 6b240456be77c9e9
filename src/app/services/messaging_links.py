"""Links de mensagem (WhatsApp) para acoes sobre consultas.

Normalizacao de telefone aqui e apenas formatacao do link; a validacao de
formato do formulario publico fica no booking_validator.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from app.domain.appointment import AppointmentRecord
    from app.domain.patient import Patient

WHATSAPP_BASE_URL = "https://wa.me"
COUNTRY_CODE = "55"

_NON_DIGITS = re.compile(r"\D")
# Marcador gravado em contact_notes pelas reservas publicas.
_NOTES_PHONE = re.compile(r"Tel:\s*([\d\s()-]+)")


class AppointmentAction(StrEnum):
    CONFIRM = "confirm"
    CANCEL = "cancel"
    RESCHEDULE = "reschedule"


def normalize_phone(phone: str) -> str:
    """Mantem so digitos e prefixa 55 quando tem 10 ou 11 digitos."""
    digits = _NON_DIGITS.sub("", phone or "")
    if len(digits) in (10, 11):
        return f"{COUNTRY_CODE}{digits}"
    return digits


def build_whatsapp_link(phone: str, message: str) -> str:
    return f"{WHATSAPP_BASE_URL}/{normalize_phone(phone)}?text={quote(message, safe='')}"


def build_action_message(
    action: AppointmentAction,
    appointment: AppointmentRecord,
    *,
    booking_url: str = "",
) -> str:
    """Mensagem padrao enviada ao paciente para cada acao."""
    name = appointment.patient_name
    day = appointment.date.strftime("%d/%m/%Y")
    hour = appointment.time.strftime("%H:%M")
    if action is AppointmentAction.CONFIRM:
        return f"Olá {name}, confirmando sua consulta para o dia {day} às {hour}. Aguardamos você!"
    if action is AppointmentAction.CANCEL:
        return (
            f"Olá {name}, sua consulta do dia {day} às {hour} foi cancelada. "
            "Entre em contato se precisar de algo."
        )
    return (
        f"Olá {name}, precisamos remarcar sua consulta. "
        f"Por favor, acesse este link para escolher um novo horário: {booking_url}"
    )


def resolve_contact_phone(appointment: AppointmentRecord, patient: Patient | None) -> str | None:
    """Telefone do cadastro ou, na falta dele, o marcador 'Tel:' das notas."""
    if patient is not None and patient.phone:
        return patient.phone
    match = _NOTES_PHONE.search(appointment.contact_notes or "")
    if match:
        phone = match.group(1).strip()
        return phone or None
    return None
