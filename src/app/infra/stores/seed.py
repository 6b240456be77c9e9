"""Dados de demonstracao para ambientes de desenvolvimento."""

from __future__ import annotations

from datetime import datetime, time, timedelta

from app.domain.appointment import AppointmentRecord, AppointmentStatus
from app.domain.patient import ClinicalNote, Patient


def build_seed_patients(reference_instant: datetime) -> list[Patient]:
    return [
        Patient(
            id="1",
            name="Ana Silva",
            email="ana.silva@example.com",
            phone="(11) 99999-0000",
            created_at=reference_instant,
            avatar_url="https://picsum.photos/200/200?random=1",
            notes=[
                ClinicalNote(
                    id="n2",
                    date=reference_instant - timedelta(days=2),
                    content="Melhora no sono relatada após exercícios de respiração.",
                ),
                ClinicalNote(
                    id="n1",
                    date=reference_instant - timedelta(days=7),
                    content="Paciente relata ansiedade moderada devido ao trabalho.",
                ),
            ],
        ),
        Patient(
            id="2",
            name="Carlos Oliveira",
            email="carlos.o@example.com",
            phone="(11) 98888-1111",
            created_at=reference_instant,
            avatar_url="https://picsum.photos/200/200?random=2",
        ),
    ]


def build_seed_appointments(reference_instant: datetime) -> list[AppointmentRecord]:
    # Registro inicial ja aparece como lido no painel.
    return [
        AppointmentRecord(
            id="a1",
            patient_id="1",
            patient_name="Ana Silva",
            date=reference_instant.date(),
            time=time(14, 0),
            status=AppointmentStatus.SCHEDULED,
            read=True,
        )
    ]
