"""Testes do modelo de consulta."""

from __future__ import annotations

from datetime import date, datetime, time

from app.domain.appointment import AppointmentRecord, AppointmentStatus
from app.domain.patient import ClinicalNote, Patient


def test_defaults_for_guest_booking() -> None:
    appointment = AppointmentRecord(patient_name="Ana", date=date(2026, 10, 20), time=time(9, 0))

    assert appointment.is_guest
    assert appointment.status is AppointmentStatus.SCHEDULED
    assert appointment.read is False
    assert len(appointment.id) == 12


def test_ids_are_unique() -> None:
    first = AppointmentRecord(patient_name="A", date=date(2026, 10, 20), time=time(9, 0))
    second = AppointmentRecord(patient_name="A", date=date(2026, 10, 20), time=time(9, 0))

    assert first.id != second.id


def test_json_uses_pt_br_status_and_hh_mm() -> None:
    appointment = AppointmentRecord(
        id="a1",
        patient_name="Ana",
        date=date(2026, 10, 20),
        time=time(9, 0),
        status=AppointmentStatus.COMPLETED,
    )

    dumped = appointment.model_dump(mode="json")

    assert dumped["status"] == "Realizado"
    assert dumped["time"] == "09:00"
    assert dumped["date"] == "2026-10-20"
    assert appointment.starts_at == datetime(2026, 10, 20, 9, 0)


def test_patient_with_note_prepends() -> None:
    patient = Patient(
        id="1",
        name="Ana",
        created_at=datetime(2026, 1, 1),
        notes=[ClinicalNote(id="old", date=datetime(2026, 1, 2), content="primeira")],
    )

    updated = patient.with_note(ClinicalNote(id="new", date=datetime(2026, 1, 9), content="nova"))

    assert [n.id for n in updated.notes] == ["new", "old"]
    assert [n.id for n in patient.notes] == ["old"]
