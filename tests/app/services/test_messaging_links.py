"""Testes dos links de mensagem (WhatsApp)."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from app.domain.appointment import AppointmentRecord
from app.domain.patient import Patient
from app.services.messaging_links import (
    AppointmentAction,
    build_action_message,
    build_whatsapp_link,
    normalize_phone,
    resolve_contact_phone,
)


def _appointment(notes: str = "") -> AppointmentRecord:
    return AppointmentRecord(
        id="a1",
        patient_id="1",
        patient_name="Ana Silva",
        date=date(2026, 10, 20),
        time=time(14, 0),
        contact_notes=notes,
    )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("(11) 99999-0000", "5511999990000"),
        ("11 3333-4444", "551133334444"),
        ("5511999990000", "5511999990000"),
        ("123", "123"),
    ],
)
def test_normalize_phone(raw: str, expected: str) -> None:
    assert normalize_phone(raw) == expected


def test_build_whatsapp_link_encodes_message() -> None:
    link = build_whatsapp_link("(11) 99999-0000", "Olá, tudo bem?")

    assert link == "https://wa.me/5511999990000?text=Ol%C3%A1%2C%20tudo%20bem%3F"


def test_confirm_message_mentions_date_and_time() -> None:
    message = build_action_message(AppointmentAction.CONFIRM, _appointment())

    assert "Ana Silva" in message
    assert "20/10/2026" in message
    assert "14:00" in message


def test_reschedule_message_includes_booking_url() -> None:
    message = build_action_message(
        AppointmentAction.RESCHEDULE,
        _appointment(),
        booking_url="https://agenda.example.com/booking",
    )

    assert message.endswith("https://agenda.example.com/booking")


def test_resolve_phone_prefers_patient_record() -> None:
    patient = Patient(id="1", name="Ana", phone="11988887777", created_at=datetime(2026, 1, 1))

    phone = resolve_contact_phone(_appointment("Tel: 11911112222"), patient)

    assert phone == "11988887777"


def test_resolve_phone_falls_back_to_contact_notes() -> None:
    notes = "Contato: a@b.com | Tel: (11) 99999-0000 | Nascimento: 01/01/1990"

    assert resolve_contact_phone(_appointment(notes), None) == "(11) 99999-0000"


def test_resolve_phone_returns_none_without_any_source() -> None:
    assert resolve_contact_phone(_appointment("sem telefone"), None) is None
