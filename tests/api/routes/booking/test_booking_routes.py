"""Testes dos endpoints públicos de agendamento."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.infra.stores import MemoryRecordStore

VALID_FORM = {
    "date": "2026-10-20",
    "time": "09:00",
    "patient_name": "Maria Souza",
    "email": "maria@example.com",
    "phone": "(11) 99999-0000",
    "date_of_birth": "15/03/1990",
}


def test_profile(client: TestClient) -> None:
    response = client.get("/booking/profile")

    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["name"] == "Dr. Silva"
    assert body["slot_duration_minutes"] == 60
    assert body["late_arrival_tolerance_minutes"] == 15


def test_dates_start_tomorrow_with_labels(client: TestClient) -> None:
    response = client.get("/booking/dates")

    assert response.status_code == 200
    first = response.json()[0]
    assert first == {"date": "2026-10-20", "label": "Ter, 20 de out"}


def test_slots_for_date(client: TestClient) -> None:
    response = client.get("/booking/slots", params={"date": "2026-10-20"})

    assert response.status_code == 200
    slots = response.json()["slots"]
    assert len(slots) == 9
    assert slots[0] == {"time": "09:00", "late_arrival_deadline": "09:15"}


def test_slots_require_valid_date(client: TestClient) -> None:
    response = client.get("/booking/slots", params={"date": "amanha"})

    assert response.status_code == 422


def test_submit_creates_appointment(client: TestClient, memory_store: MemoryRecordStore) -> None:
    response = client.post("/booking", json=VALID_FORM)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Agendado"
    assert body["read"] is False
    assert body["patient_id"] == "guest"
    assert body["time"] == "09:00"
    assert memory_store.get_appointment(body["id"]) is not None


def test_submit_returns_field_errors(client: TestClient, memory_store: MemoryRecordStore) -> None:
    response = client.post("/booking", json={**VALID_FORM, "email": "a@b", "phone": "123"})

    assert response.status_code == 422
    errors = response.json()["field_errors"]
    assert errors["email"]["kind"] == "invalid_email_format"
    assert errors["phone"]["kind"] == "invalid_phone_format"
    assert memory_store.load_appointments() == []


def test_submit_expired_slot_returns_conflict(client: TestClient) -> None:
    response = client.post("/booking", json={**VALID_FORM, "date": "2026-10-19", "time": "09:00"})

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "slot_expired"
    assert body["field_errors"] == {}
