"""Protocolo de persistencia de pacientes, consultas e configuracoes.

O nucleo de agendamento nunca acessa o store diretamente: quem orquestra
recebe uma implementacao injetada e repassa valores puros ao nucleo.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.appointment import AppointmentRecord, AppointmentStatus
    from app.domain.patient import ClinicalNote, Patient
    from app.domain.scheduling import ProfessionalSettings


class RecordStoreProtocol(ABC):
    """Contrato minimo do store chave-valor (escritor unico)."""

    @abstractmethod
    def load_patients(self) -> list[Patient]: ...

    @abstractmethod
    def get_patient(self, patient_id: str) -> Patient | None: ...

    @abstractmethod
    def save_patient(self, patient: Patient) -> None:
        """Insere ou substitui o paciente pelo id."""

    @abstractmethod
    def add_clinical_note(self, patient_id: str, note: ClinicalNote) -> ClinicalNote | None:
        """Insere a nota no topo da lista. Retorna None se o paciente nao existe."""

    @abstractmethod
    def load_appointments(self) -> list[AppointmentRecord]: ...

    @abstractmethod
    def get_appointment(self, appointment_id: str) -> AppointmentRecord | None: ...

    @abstractmethod
    def append_appointment(self, appointment: AppointmentRecord) -> None: ...

    @abstractmethod
    def update_status(self, appointment_id: str, status: AppointmentStatus) -> bool:
        """Atualiza status. Retorna False se a consulta nao existe."""

    @abstractmethod
    def mark_read(self, appointment_id: str) -> bool:
        """Marca notificacao como lida. Retorna False se a consulta nao existe."""

    @abstractmethod
    def load_settings(self) -> ProfessionalSettings:
        """Carrega settings aplicando o backfill de blocos ausentes."""

    @abstractmethod
    def save_settings(self, settings: ProfessionalSettings) -> None: ...
