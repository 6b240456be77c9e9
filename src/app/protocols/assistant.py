"""Contrato do assistente de IA (resumo clinico e comandos da agenda).

Implementacoes nunca levantam excecao para o chamador: falhas de rede ou
de configuracao viram mensagens fixas para o usuario.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from app.domain.appointment import AppointmentRecord
    from app.domain.patient import ClinicalNote


class CommandAction(StrEnum):
    """Acoes que o assistente pode identificar em um comando livre."""

    CONFIRM = "CONFIRM"
    CANCEL = "CANCEL"
    RESCHEDULE_LINK = "RESCHEDULE_LINK"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class AssistantCommand:
    """Interpretacao de um comando do profissional."""

    action: CommandAction
    reply: str
    appointment_id: str | None = None


@runtime_checkable
class AssistantProtocol(Protocol):
    """Contrato para servicos de geracao de texto."""

    async def summarize_notes(self, patient_name: str, notes: Sequence[ClinicalNote]) -> str:
        """Resume a evolucao do paciente. Nunca levanta excecao."""
        ...

    async def interpret_command(
        self,
        message: str,
        appointments: Sequence[AppointmentRecord],
        reference_instant: datetime,
    ) -> AssistantCommand:
        """Interpreta comando livre sobre a agenda. Nunca levanta excecao."""
        ...
