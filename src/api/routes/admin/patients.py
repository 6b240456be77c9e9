"""Endpoints de pacientes e prontuário."""

from __future__ import annotations

import asyncio
import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_assistant, get_clock, get_store
from api.routes.admin.schemas import NotePayload, PatientPayload, SummaryResponse
from app.domain.errors import PatientNotFoundError
from app.domain.patient import ClinicalNote, Patient
from app.protocols.assistant import AssistantProtocol
from app.protocols.record_store import RecordStoreProtocol
from app.services.dashboard import search_patients

router = APIRouter()

StoreDep = Annotated[RecordStoreProtocol, Depends(get_store)]
ClockDep = Annotated[dt.datetime, Depends(get_clock)]


@router.get("", response_model=list[Patient])
def list_patients(
    store: StoreDep,
    q: Annotated[str, Query(description="Busca por nome")] = "",
) -> list[Patient]:
    return search_patients(store.load_patients(), q)


@router.post("", response_model=Patient, status_code=status.HTTP_201_CREATED)
def create_patient(payload: PatientPayload, store: StoreDep, now: ClockDep) -> Patient:
    patient = Patient(
        name=payload.name.strip(),
        email=payload.email.strip(),
        phone=payload.phone.strip(),
        avatar_url=payload.avatar_url,
        created_at=now,
    )
    store.save_patient(patient)
    return patient


@router.get("/{patient_id}", response_model=Patient)
def get_patient(patient_id: str, store: StoreDep) -> Patient:
    return _get_or_404(store, patient_id)


@router.put("/{patient_id}", response_model=Patient)
def update_patient(patient_id: str, payload: PatientPayload, store: StoreDep) -> Patient:
    current = _get_or_404(store, patient_id)
    updated = current.model_copy(
        update={
            "name": payload.name.strip(),
            "email": payload.email.strip(),
            "phone": payload.phone.strip(),
            "avatar_url": payload.avatar_url or current.avatar_url,
        }
    )
    store.save_patient(updated)
    return updated


@router.post(
    "/{patient_id}/notes",
    response_model=ClinicalNote,
    status_code=status.HTTP_201_CREATED,
)
def add_note(
    patient_id: str,
    payload: NotePayload,
    store: StoreDep,
    now: ClockDep,
) -> ClinicalNote:
    note = ClinicalNote(date=now, content=payload.content.strip(), sentiment=payload.sentiment)
    saved = store.add_clinical_note(patient_id, note)
    if saved is None:
        raise PatientNotFoundError(patient_id)
    return saved


@router.post("/{patient_id}/summary", response_model=SummaryResponse)
async def summarize_patient(
    patient_id: str,
    store: StoreDep,
    assistant: Annotated[AssistantProtocol, Depends(get_assistant)],
) -> SummaryResponse:
    patient = await asyncio.to_thread(_get_or_404, store, patient_id)
    summary = await assistant.summarize_notes(patient.name, patient.notes)
    return SummaryResponse(summary=summary)


def _get_or_404(store: RecordStoreProtocol, patient_id: str) -> Patient:
    patient = store.get_patient(patient_id)
    if patient is None:
        raise PatientNotFoundError(patient_id)
    return patient
