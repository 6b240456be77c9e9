"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.booking_service import BookingService
from app.services.booking_validator import (
    BookingErrorKind,
    BookingRequest,
    BookingValidationResult,
    validate_booking,
)
from app.services.slot_generator import list_bookable_dates, list_bookable_slots

__all__ = [
    "BookingErrorKind",
    "BookingRequest",
    "BookingService",
    "BookingValidationResult",
    "list_bookable_dates",
    "list_bookable_slots",
    "validate_booking",
]
