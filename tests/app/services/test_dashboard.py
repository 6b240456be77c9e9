"""Testes das agregações do painel."""

from __future__ import annotations

from datetime import date, datetime, time

from app.domain.appointment import AppointmentRecord, AppointmentStatus
from app.domain.patient import Patient
from app.services.dashboard import agenda_for_day, search_patients, summarize_dashboard

NOW = datetime(2026, 10, 19, 10, 0)


def _appt(id_: str, day: date, start: time, **kwargs: object) -> AppointmentRecord:
    return AppointmentRecord(id=id_, patient_name=f"P {id_}", date=day, time=start, **kwargs)


def test_summarize_dashboard_counts_and_split() -> None:
    appointments = [
        _appt("late", date(2026, 10, 21), time(9, 0), read=False),
        _appt("old", date(2026, 10, 12), time(14, 0), status=AppointmentStatus.COMPLETED, read=True),
        _appt("soon", date(2026, 10, 19), time(15, 0), status=AppointmentStatus.CONFIRMED),
        _appt("gone", date(2026, 10, 19), time(9, 0), status=AppointmentStatus.CANCELLED, read=True),
    ]

    summary = summarize_dashboard(appointments, NOW)

    assert summary.total == 4
    assert summary.completed == 2
    assert [a.id for a in summary.unread] == ["soon", "late"]
    assert [a.id for a in summary.upcoming] == ["soon", "late"]
    assert [a.id for a in summary.past] == ["old", "gone"]


def test_agenda_for_day_puts_unread_first() -> None:
    day = date(2026, 10, 20)
    appointments = [
        _appt("a", day, time(9, 0), read=True),
        _appt("b", day, time(11, 0), read=False),
        _appt("c", day, time(10, 0), read=False),
        _appt("other", date(2026, 10, 21), time(8, 0)),
    ]

    agenda = agenda_for_day(appointments, day)

    assert [a.id for a in agenda] == ["c", "b", "a"]


def test_search_patients_is_case_insensitive() -> None:
    patients = [
        Patient(id="1", name="Ana Silva", created_at=NOW),
        Patient(id="2", name="Carlos Oliveira", created_at=NOW),
    ]

    assert [p.id for p in search_patients(patients, "silva")] == ["1"]
    assert [p.id for p in search_patients(patients, "  ")] == ["1", "2"]
    assert search_patients(patients, "zz") == []
