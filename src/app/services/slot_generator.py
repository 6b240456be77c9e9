"""Geracao de datas e horarios agendaveis a partir da regra semanal.

Funcoes puras: o instante de referencia ("agora") e sempre recebido por
parametro, nunca lido do relogio. A lista e regenerada a cada chamada para
que a janela de antecedencia minima fique correta em relacao ao relogio.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.scheduling import AvailabilityRule, SchedulingPolicy

# Indexados pela convencao da regra (0 = domingo).
_PT_WEEKDAY = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sab")
_PT_MONTH = (
    "jan",
    "fev",
    "mar",
    "abr",
    "mai",
    "jun",
    "jul",
    "ago",
    "set",
    "out",
    "nov",
    "dez",
)


def weekday_index(day: date) -> int:
    """Converte `date.weekday()` (0 = segunda) para 0 = domingo."""
    return (day.weekday() + 1) % 7


def list_bookable_dates(
    rule: AvailabilityRule,
    policy: SchedulingPolicy,
    reference_instant: datetime,
) -> list[date]:
    """Retorna as datas futuras com atendimento dentro do horizonte.

    Comeca em amanha (hoje nunca entra, mesmo se for dia ativo) e vai ate
    `max_future_days` dias a frente, inclusive. Para no limite do calendario.
    """
    today = reference_instant.date()
    active = set(rule.active_weekdays)
    dates: list[date] = []
    for step in range(1, policy.max_future_days + 1):
        try:
            candidate = today + timedelta(days=step)
        except OverflowError:
            break
        if weekday_index(candidate) in active:
            dates.append(candidate)
    return dates


def list_bookable_slots(
    rule: AvailabilityRule,
    policy: SchedulingPolicy,
    day: date,
    reference_instant: datetime,
) -> list[time]:
    """Retorna horarios de inicio livres para a data informada.

    Slots comecam em `daily_start` e avancam por `slot_duration_minutes`.
    Um slot que nao cabe inteiro antes de `daily_end` e descartado (nunca
    truncado). So entram slots estritamente depois de
    `reference_instant + min_notice_hours`. Uma antecedencia alem do
    calendario resulta em lista vazia.
    """
    if not rule.has_valid_window or rule.slot_duration_minutes <= 0:
        return []

    step = timedelta(minutes=rule.slot_duration_minutes)
    try:
        earliest = reference_instant + timedelta(hours=policy.min_notice_hours)
    except OverflowError:
        return []
    end = datetime.combine(day, rule.daily_end)
    current = datetime.combine(day, rule.daily_start)

    slots: list[time] = []
    while end - current >= step:
        if current > earliest:
            slots.append(current.time())
        current += step
    return slots


def format_date_label(day: date) -> str:
    """Rotulo curto em pt-BR, ex.: 'Ter, 20 de out'."""
    weekday = _PT_WEEKDAY[weekday_index(day)]
    month = _PT_MONTH[day.month - 1]
    return f"{weekday}, {day.day:02d} de {month}"


def late_arrival_deadline(slot_time: time, policy: SchedulingPolicy) -> time | None:
    """Horario limite de chegada considerando a tolerancia de atraso.

    Apenas informativo para o paciente. Retorna None sem tolerancia.
    """
    if policy.late_arrival_tolerance_minutes <= 0:
        return None
    anchor = datetime.combine(date.min, slot_time)
    try:
        deadline = anchor + timedelta(minutes=policy.late_arrival_tolerance_minutes)
    except OverflowError:
        return None
    return deadline.time()
