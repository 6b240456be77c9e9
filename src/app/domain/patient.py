"""Paciente e anotacoes clinicas.

Notas ficam ordenadas da mais recente para a mais antiga, que e a ordem
usada pela tela de prontuario e pelo resumo gerado por IA.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return uuid4().hex[:9]


class ClinicalNote(BaseModel):
    """Anotacao de sessao registrada pelo profissional."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=_new_id)
    date: datetime = Field(..., description="Momento em que a nota foi registrada.")
    content: str = Field(..., min_length=1)
    sentiment: str | None = None


class Patient(BaseModel):
    """Paciente cadastrado pelo profissional."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=_new_id)
    name: str = Field(..., min_length=1)
    email: str = ""
    phone: str = ""
    notes: list[ClinicalNote] = Field(default_factory=list)
    created_at: datetime
    avatar_url: str | None = None

    def with_note(self, note: ClinicalNote) -> Patient:
        """Retorna copia com a nota inserida no topo da lista."""
        return self.model_copy(update={"notes": [note, *self.notes]})


__all__ = ["ClinicalNote", "Patient"]
