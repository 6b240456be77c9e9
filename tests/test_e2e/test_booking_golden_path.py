"""Teste E2E do agendamento público até a notificação no painel."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.infra.stores import MemoryRecordStore
from tests.fakes.fixed_clock import MONDAY_10AM


def test_public_booking_reaches_dashboard(client: TestClient, memory_store: MemoryRecordStore) -> None:
    memory_store.seed_if_empty(MONDAY_10AM)

    first_date = client.get("/booking/dates").json()[0]["date"]
    slots = client.get("/booking/slots", params={"date": first_date}).json()["slots"]
    assert first_date == "2026-10-20"
    assert len(slots) == 9

    created = client.post(
        "/booking",
        json={
            "date": first_date,
            "time": slots[0]["time"],
            "patient_name": "Paciente Novo",
            "email": "novo@example.com",
            "phone": "11999990000",
            "date_of_birth": "1992-05-10",
        },
    )
    assert created.status_code == 201
    appointment_id = created.json()["id"]

    dashboard = client.get("/dashboard").json()
    assert [a["id"] for a in dashboard["unread"]] == [appointment_id]

    link = client.post(f"/appointments/{appointment_id}/actions/confirm").json()["message_link"]
    assert link.startswith("https://wa.me/5511999990000?text=")
    assert client.post(f"/appointments/{appointment_id}/read").json()["status"] == "Confirmado"
