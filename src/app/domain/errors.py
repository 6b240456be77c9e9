"""Erros de dominio para buscas e acoes administrativas."""

from __future__ import annotations


class AgendaLookupError(LookupError):
    """Base para registros inexistentes no store."""


class AppointmentNotFoundError(AgendaLookupError):
    """Consulta nao encontrada pelo id informado."""

    def __init__(self, appointment_id: str) -> None:
        super().__init__(f"Consulta não encontrada: {appointment_id}")
        self.appointment_id = appointment_id


class PatientNotFoundError(AgendaLookupError):
    """Paciente nao encontrado pelo id informado."""

    def __init__(self, patient_id: str) -> None:
        super().__init__(f"Paciente não encontrado: {patient_id}")
        self.patient_id = patient_id


class ContactPhoneNotFoundError(ValueError):
    """Nenhum telefone disponivel para montar o link de mensagem."""

    def __init__(self, patient_name: str) -> None:
        super().__init__(f"Telefone não encontrado para {patient_name}.")
        self.patient_name = patient_name
