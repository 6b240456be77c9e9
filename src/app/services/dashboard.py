"""Agregacoes do painel administrativo (sem IO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.appointment import AppointmentStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date, datetime

    from app.domain.appointment import AppointmentRecord
    from app.domain.patient import Patient

_DONE_STATUSES = frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CONFIRMED})


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    total: int
    completed: int
    unread: list[AppointmentRecord]
    upcoming: list[AppointmentRecord]
    past: list[AppointmentRecord]


def summarize_dashboard(
    appointments: Sequence[AppointmentRecord],
    reference_instant: datetime,
) -> DashboardSummary:
    """Contadores, notificacoes nao lidas e divisao proximas/passadas."""
    ordered = sorted(appointments, key=lambda a: a.starts_at)
    return DashboardSummary(
        total=len(appointments),
        completed=sum(1 for a in appointments if a.status in _DONE_STATUSES),
        unread=[a for a in ordered if not a.read],
        upcoming=[a for a in ordered if a.starts_at >= reference_instant],
        past=[a for a in ordered if a.starts_at < reference_instant],
    )


def agenda_for_day(appointments: Iterable[AppointmentRecord], day: date) -> list[AppointmentRecord]:
    """Consultas do dia: nao lidas primeiro, depois por horario."""
    daily = [a for a in appointments if a.date == day]
    return sorted(daily, key=lambda a: (a.read, a.time))


def search_patients(patients: Iterable[Patient], query: str) -> list[Patient]:
    needle = (query or "").strip().lower()
    if not needle:
        return list(patients)
    return [p for p in patients if needle in p.name.lower()]
