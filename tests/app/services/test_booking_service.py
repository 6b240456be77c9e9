"""Testes do fluxo público de agendamento com store em memória."""

from __future__ import annotations

from datetime import date, time

from app.domain.appointment import AppointmentStatus
from app.infra.stores import MemoryRecordStore
from app.services import BookingRequest, BookingService


def _request(**overrides: object) -> BookingRequest:
    data: dict[str, object] = {
        "date": date(2026, 10, 20),
        "time": time(9, 0),
        "patient_name": "João Lima",
        "email": "joao@example.com",
        "phone": "11999990000",
        "date_of_birth": "1985-07-01",
    }
    data.update(overrides)
    return BookingRequest(**data)  # type: ignore[arg-type]


def test_monday_morning_golden_path(memory_store: MemoryRecordStore, monday_10am) -> None:
    service = BookingService(memory_store, id_factory=lambda: "appt-1")

    dates = service.available_dates(monday_10am)
    assert dates[0] == date(2026, 10, 20)

    slots = service.available_slots(dates[0], monday_10am)
    assert len(slots) == 9
    assert slots[0] == time(9, 0)
    assert slots[-1] == time(17, 0)

    result = service.submit(_request(date=dates[0], time=slots[0]), monday_10am)

    assert result.is_valid
    stored = memory_store.load_appointments()
    assert len(stored) == 1
    assert stored[0].id == "appt-1"
    assert stored[0].status is AppointmentStatus.SCHEDULED
    assert stored[0].read is False


def test_invalid_submission_is_not_persisted(memory_store: MemoryRecordStore, monday_10am) -> None:
    service = BookingService(memory_store)

    result = service.submit(_request(email="a@b"), monday_10am)

    assert not result.is_valid
    assert memory_store.load_appointments() == []


def test_expired_slot_is_not_persisted(memory_store: MemoryRecordStore, monday_10am) -> None:
    service = BookingService(memory_store)

    result = service.submit(_request(date=date(2026, 10, 19), time=time(9, 0)), monday_10am)

    assert result.slot_expired
    assert memory_store.load_appointments() == []


def test_uses_saved_settings(memory_store: MemoryRecordStore, monday_10am) -> None:
    settings = memory_store.load_settings()
    custom = settings.model_copy(
        update={
            "availability": settings.availability.model_copy(
                update={"slot_duration_minutes": 30, "active_weekdays": (3,)}
            )
        }
    )
    memory_store.save_settings(custom)
    service = BookingService(memory_store)

    dates = service.available_dates(monday_10am)
    slots = service.available_slots(dates[0], monday_10am)

    assert dates[0] == date(2026, 10, 21)  # quarta
    assert len(slots) == 18


def test_booked_slot_remains_listed(memory_store: MemoryRecordStore, monday_10am) -> None:
    # Sem detecção de conflito: o horário reservado continua ofertado.
    service = BookingService(memory_store)
    service.submit(_request(), monday_10am)

    slots = service.available_slots(date(2026, 10, 20), monday_10am)

    assert time(9, 0) in slots
