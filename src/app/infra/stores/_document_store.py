"""Base comum dos stores chave-valor de documentos JSON.

Cada colecao (pacientes, consultas, settings) vive em uma unica chave como
documento JSON, lida e reescrita inteira a cada operacao. Sem locking:
o modelo de uso e escritor unico (um profissional).
"""

from __future__ import annotations

import json
import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from app.domain.appointment import AppointmentRecord
from app.domain.patient import Patient
from app.domain.scheduling import load_professional_settings
from app.infra.stores.seed import build_seed_appointments, build_seed_patients
from app.protocols.record_store import RecordStoreProtocol
from utils.errors import CorruptedRecordError

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.appointment import AppointmentStatus
    from app.domain.patient import ClinicalNote
    from app.domain.scheduling import ProfessionalSettings

logger = logging.getLogger(__name__)

PATIENTS_KEY = "patients"
APPOINTMENTS_KEY = "appointments"
SETTINGS_KEY = "settings"


class JsonDocumentStore(RecordStoreProtocol):
    """Implementa o protocolo sobre leitura/escrita de documentos brutos."""

    @abstractmethod
    def _read(self, key: str) -> str | bytes | None: ...

    @abstractmethod
    def _write(self, key: str, data: str) -> None: ...

    def _load_document(self, key: str) -> Any | None:
        raw = self._read(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("record_load_error", extra={"key": key, "error": str(exc)})
            raise CorruptedRecordError(key) from exc

    def _dump_document(self, key: str, document: Any) -> None:
        self._write(key, json.dumps(document, ensure_ascii=False))

    # ──────────────────────────────────────────────────────────────
    # Pacientes
    # ──────────────────────────────────────────────────────────────

    def load_patients(self) -> list[Patient]:
        items = self._load_document(PATIENTS_KEY) or []
        return [Patient.model_validate(item) for item in items]

    def get_patient(self, patient_id: str) -> Patient | None:
        return next((p for p in self.load_patients() if p.id == patient_id), None)

    def save_patient(self, patient: Patient) -> None:
        patients = self.load_patients()
        for index, existing in enumerate(patients):
            if existing.id == patient.id:
                patients[index] = patient
                break
        else:
            patients.append(patient)
        self._save_patients(patients)

    def add_clinical_note(self, patient_id: str, note: ClinicalNote) -> ClinicalNote | None:
        patients = self.load_patients()
        for index, patient in enumerate(patients):
            if patient.id == patient_id:
                patients[index] = patient.with_note(note)
                self._save_patients(patients)
                return note
        return None

    def _save_patients(self, patients: list[Patient]) -> None:
        self._dump_document(PATIENTS_KEY, [p.model_dump(mode="json") for p in patients])

    # ──────────────────────────────────────────────────────────────
    # Consultas
    # ──────────────────────────────────────────────────────────────

    def load_appointments(self) -> list[AppointmentRecord]:
        items = self._load_document(APPOINTMENTS_KEY) or []
        return [AppointmentRecord.model_validate(item) for item in items]

    def get_appointment(self, appointment_id: str) -> AppointmentRecord | None:
        return next((a for a in self.load_appointments() if a.id == appointment_id), None)

    def append_appointment(self, appointment: AppointmentRecord) -> None:
        appointments = self.load_appointments()
        appointments.append(appointment)
        self._save_appointments(appointments)
        logger.debug("appointment_appended", extra={"appointment_id": appointment.id})

    def update_status(self, appointment_id: str, status: AppointmentStatus) -> bool:
        return self._update_appointment(appointment_id, {"status": status})

    def mark_read(self, appointment_id: str) -> bool:
        return self._update_appointment(appointment_id, {"read": True})

    def _update_appointment(self, appointment_id: str, changes: dict[str, Any]) -> bool:
        appointments = self.load_appointments()
        for index, appointment in enumerate(appointments):
            if appointment.id == appointment_id:
                appointments[index] = appointment.model_copy(update=changes)
                self._save_appointments(appointments)
                return True
        return False

    def _save_appointments(self, appointments: list[AppointmentRecord]) -> None:
        self._dump_document(
            APPOINTMENTS_KEY,
            [a.model_dump(mode="json") for a in appointments],
        )

    # ──────────────────────────────────────────────────────────────
    # Settings
    # ──────────────────────────────────────────────────────────────

    def load_settings(self) -> ProfessionalSettings:
        return load_professional_settings(self._load_document(SETTINGS_KEY))

    def save_settings(self, settings: ProfessionalSettings) -> None:
        self._dump_document(SETTINGS_KEY, settings.model_dump(mode="json"))

    # ──────────────────────────────────────────────────────────────
    # Seed (desenvolvimento)
    # ──────────────────────────────────────────────────────────────

    def seed_if_empty(self, reference_instant: datetime) -> bool:
        """Grava dados de demonstracao nas colecoes vazias."""
        seeded = False
        if self._read(PATIENTS_KEY) is None:
            self._save_patients(build_seed_patients(reference_instant))
            seeded = True
        if self._read(APPOINTMENTS_KEY) is None:
            self._save_appointments(build_seed_appointments(reference_instant))
            seeded = True
        if self._read(SETTINGS_KEY) is None:
            self.save_settings(load_professional_settings(None))
            seeded = True
        if seeded:
            logger.info("record_store_seeded", extra={"store": type(self).__name__})
        return seeded
