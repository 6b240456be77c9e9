"""Orquestracao do fluxo publico de agendamento.

Conecta o store injetado ao nucleo puro (slot_generator + booking_validator).
O instante de referencia chega sempre do chamador.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.services.booking_validator import validate_booking
from app.services.slot_generator import list_bookable_dates, list_bookable_slots

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date, datetime, time

    from app.domain.scheduling import ProfessionalSettings
    from app.protocols.record_store import RecordStoreProtocol
    from app.services.booking_validator import BookingRequest, BookingValidationResult

logger = logging.getLogger(__name__)


class BookingService:
    """Fluxo publico: datas -> horarios -> formulario -> consulta."""

    __slots__ = ("_id_factory", "_store")

    def __init__(
        self,
        store: RecordStoreProtocol,
        *,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._id_factory = id_factory

    def settings(self) -> ProfessionalSettings:
        return self._store.load_settings()

    def available_dates(self, reference_instant: datetime) -> list[date]:
        settings = self._store.load_settings()
        return list_bookable_dates(settings.availability, settings.scheduling, reference_instant)

    def available_slots(self, day: date, reference_instant: datetime) -> list[time]:
        settings = self._store.load_settings()
        return list_bookable_slots(
            settings.availability,
            settings.scheduling,
            day,
            reference_instant,
        )

    def submit(
        self,
        request: BookingRequest,
        reference_instant: datetime,
    ) -> BookingValidationResult:
        """Valida a reserva e persiste a consulta quando valida."""
        if self._id_factory is None:
            result = validate_booking(request, reference_instant)
        else:
            result = validate_booking(request, reference_instant, id_factory=self._id_factory)

        if result.appointment is None:
            logger.info(
                "booking_rejected",
                extra={
                    "component": "booking_service",
                    "slot_expired": result.slot_expired,
                    "fields": sorted(result.field_errors),
                },
            )
            return result

        self._store.append_appointment(result.appointment)
        logger.info(
            "booking_created",
            extra={
                "component": "booking_service",
                "appointment_id": result.appointment.id,
                "date": result.appointment.date.isoformat(),
            },
        )
        return result
