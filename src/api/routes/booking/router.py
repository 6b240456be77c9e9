"""Endpoints públicos de agendamento.

Endpoints:
- GET /booking/profile: dados do profissional
- GET /booking/dates: próximas datas com atendimento
- GET /booking/slots?date=YYYY-MM-DD: horários livres da data
- POST /booking: envia o formulário (201, 422 por campo, 409 horário expirado)
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from api.dependencies import get_clock, get_store
from api.routes.booking.schemas import (
    BookableDate,
    BookableSlot,
    BookableSlotsResponse,
    BookingPayload,
    BookingProfileResponse,
)
from app.protocols.record_store import RecordStoreProtocol
from app.services import BookingRequest, BookingService
from app.services.slot_generator import format_date_label, late_arrival_deadline

logger = logging.getLogger(__name__)

router = APIRouter()


def get_booking_service(
    store: Annotated[RecordStoreProtocol, Depends(get_store)],
) -> BookingService:
    return BookingService(store)


ServiceDep = Annotated[BookingService, Depends(get_booking_service)]
ClockDep = Annotated[dt.datetime, Depends(get_clock)]


@router.get("/profile", response_model=BookingProfileResponse)
def booking_profile(service: ServiceDep) -> BookingProfileResponse:
    settings = service.settings()
    return BookingProfileResponse(
        profile=settings.profile,
        slot_duration_minutes=settings.availability.slot_duration_minutes,
        late_arrival_tolerance_minutes=settings.scheduling.late_arrival_tolerance_minutes,
    )


@router.get("/dates", response_model=list[BookableDate])
def bookable_dates(service: ServiceDep, now: ClockDep) -> list[BookableDate]:
    return [
        BookableDate(date=day, label=format_date_label(day))
        for day in service.available_dates(now)
    ]


@router.get("/slots", response_model=BookableSlotsResponse)
def bookable_slots(
    service: ServiceDep,
    now: ClockDep,
    date: Annotated[dt.date, Query(description="Data no formato YYYY-MM-DD")],
) -> BookableSlotsResponse:
    policy = service.settings().scheduling
    slots = []
    for slot in service.available_slots(date, now):
        deadline = late_arrival_deadline(slot, policy)
        slots.append(
            BookableSlot(
                time=slot.strftime("%H:%M"),
                late_arrival_deadline=deadline.strftime("%H:%M") if deadline else None,
            )
        )
    return BookableSlotsResponse(date=date, slots=slots)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=None)
def submit_booking(payload: BookingPayload, service: ServiceDep, now: ClockDep) -> JSONResponse:
    request = BookingRequest(
        date=payload.date,
        time=payload.time,
        patient_name=payload.patient_name,
        email=payload.email,
        phone=payload.phone,
        date_of_birth=payload.date_of_birth,
    )
    result = service.submit(request, now)

    if result.appointment is not None:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=result.appointment.model_dump(mode="json"),
        )

    field_errors = {
        name: {"kind": str(error.kind), "message": error.message}
        for name, error in result.field_errors.items()
    }
    if result.slot_expired:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "error": "slot_expired",
                "message": result.form_message,
                "field_errors": field_errors,
            },
        )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "validation_failed", "field_errors": field_errors},
    )
