"""Testes da validação de reservas públicas."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from app.domain.appointment import GUEST_PATIENT_ID, AppointmentStatus
from app.services.booking_validator import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    BookingErrorKind,
    BookingRequest,
    build_contact_notes,
    validate_booking,
)

REFERENCE = datetime(2026, 10, 19, 10, 0)


def _request(**overrides: object) -> BookingRequest:
    data: dict[str, object] = {
        "date": date(2026, 10, 20),
        "time": time(9, 0),
        "patient_name": "Maria Souza",
        "email": "maria@example.com",
        "phone": "(11) 99999-0000",
        "date_of_birth": "1990-03-15",
    }
    data.update(overrides)
    return BookingRequest(**data)  # type: ignore[arg-type]


class TestPatterns:
    @pytest.mark.parametrize("email", ["a@b.com", "nome.sobrenome@clinica.com.br"])
    def test_valid_emails(self, email: str) -> None:
        assert EMAIL_PATTERN.match(email)

    @pytest.mark.parametrize("email", ["a@b", "sem-arroba.com", "a b@c.com", "@b.com"])
    def test_invalid_emails(self, email: str) -> None:
        assert not EMAIL_PATTERN.match(email)

    @pytest.mark.parametrize(
        "phone",
        ["11999990000", "(11) 99999-0000", "(11)99999-0000", "11 3333-4444", "1133334444"],
    )
    def test_valid_phones(self, phone: str) -> None:
        assert PHONE_PATTERN.match(phone)

    @pytest.mark.parametrize("phone", ["123", "+55 11 99999-0000", "(11) 999-0000", "abc"])
    def test_invalid_phones(self, phone: str) -> None:
        assert not PHONE_PATTERN.match(phone)


class TestValidateBooking:
    def test_valid_request_builds_guest_appointment(self) -> None:
        result = validate_booking(_request(), REFERENCE, id_factory=lambda: "fixed-id")

        assert result.is_valid
        assert result.field_errors == {}
        appointment = result.appointment
        assert appointment is not None
        assert appointment.id == "fixed-id"
        assert appointment.patient_id == GUEST_PATIENT_ID
        assert appointment.patient_name == "Maria Souza"
        assert appointment.status is AppointmentStatus.SCHEDULED
        assert appointment.read is False
        assert appointment.date == date(2026, 10, 20)
        assert appointment.time == time(9, 0)
        assert appointment.contact_notes == (
            "Contato: maria@example.com | Tel: (11) 99999-0000 | Nascimento: 15/03/1990"
        )

    def test_accepts_brazilian_date_of_birth_format(self) -> None:
        result = validate_booking(_request(date_of_birth="15/03/1990"), REFERENCE)

        assert result.is_valid

    def test_invalid_email_and_phone(self) -> None:
        result = validate_booking(_request(email="a@b", phone="123"), REFERENCE)

        assert not result.is_valid
        assert result.field_errors["email"].kind is BookingErrorKind.INVALID_EMAIL_FORMAT
        assert result.field_errors["phone"].kind is BookingErrorKind.INVALID_PHONE_FORMAT
        assert result.field_errors["phone"].message == "Formato inválido. Use (DD) 99999-9999"

    def test_missing_fields_accumulate(self) -> None:
        result = validate_booking(
            _request(patient_name="  ", email="", phone="", date_of_birth=""),
            REFERENCE,
        )

        kinds = {name: error.kind for name, error in result.field_errors.items()}
        assert kinds == {
            "patient_name": BookingErrorKind.MISSING_PATIENT_NAME,
            "email": BookingErrorKind.MISSING_EMAIL,
            "phone": BookingErrorKind.MISSING_PHONE,
            "date_of_birth": BookingErrorKind.MISSING_DATE_OF_BIRTH,
        }
        assert result.form_error is None
        assert result.appointment is None

    def test_future_date_of_birth(self) -> None:
        result = validate_booking(_request(date_of_birth="2026-10-20"), REFERENCE)

        assert result.field_errors["date_of_birth"].kind is BookingErrorKind.FUTURE_DATE_OF_BIRTH

    def test_date_of_birth_today_is_accepted(self) -> None:
        result = validate_booking(_request(date_of_birth="2026-10-19"), REFERENCE)

        assert result.is_valid

    def test_unparseable_date_of_birth(self) -> None:
        result = validate_booking(_request(date_of_birth="31/02/2000"), REFERENCE)

        assert result.field_errors["date_of_birth"].kind is BookingErrorKind.INVALID_DATE_OF_BIRTH

    def test_slot_expired_even_with_valid_fields(self) -> None:
        result = validate_booking(
            _request(date=date(2026, 10, 19), time=time(9, 0)),
            REFERENCE,
        )

        assert result.slot_expired
        assert result.field_errors == {}
        assert result.appointment is None
        assert result.form_message is not None
        assert "expirou" in result.form_message

    def test_slot_starting_now_is_expired(self) -> None:
        result = validate_booking(_request(date=date(2026, 10, 19), time=time(10, 0)), REFERENCE)

        assert result.form_error is BookingErrorKind.SLOT_EXPIRED

    def test_slot_inside_notice_window_is_not_expired(self) -> None:
        # A rechecagem usa o "agora" bruto, sem antecedência mínima.
        result = validate_booking(_request(date=date(2026, 10, 19), time=time(11, 0)), REFERENCE)

        assert result.is_valid

    def test_slot_expired_and_field_errors_together(self) -> None:
        result = validate_booking(
            _request(date=date(2026, 10, 18), email="invalido"),
            REFERENCE,
        )

        assert result.slot_expired
        assert set(result.field_errors) == {"email"}

    def test_trims_name_and_contact(self) -> None:
        result = validate_booking(
            _request(patient_name="  Maria  ", email=" maria@example.com "),
            REFERENCE,
        )

        assert result.appointment is not None
        assert result.appointment.patient_name == "Maria"
        assert "Contato: maria@example.com |" in result.appointment.contact_notes


def test_build_contact_notes_format() -> None:
    notes = build_contact_notes(
        email="x@y.com",
        phone="11999990000",
        date_of_birth=date(2001, 1, 2),
    )

    assert notes == "Contato: x@y.com | Tel: 11999990000 | Nascimento: 02/01/2001"
