"""Prompts do assistente (pt-BR)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from app.domain.appointment import AppointmentRecord
    from app.domain.patient import ClinicalNote

_WEEKDAYS = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)

SUMMARY_SYSTEM_PROMPT = (
    "Atue como um assistente clínico sênior para um psicólogo. "
    "Gere um resumo clínico conciso (máximo 2 parágrafos) em Português. "
    "Foque na evolução do paciente, principais queixas recorrentes e progressos notáveis. "
    "Use uma linguagem profissional e objetiva."
)

COMMAND_SYSTEM_PROMPT = """Você é um assistente de agendamento de uma clínica de psicologia.

Instruções:
1. Identifique a intenção do usuário:
   - CONFIRM (Confirmar consulta)
   - CANCEL (Cancelar consulta)
   - RESCHEDULE_LINK (Pedir para remarcar/enviar link)
   - UNKNOWN (Não entendeu ou ambíguo)
2. Identifique qual agendamento (ID) o usuário se refere baseando-se no nome \
do paciente e datas relativas (hoje, amanhã, dia X).
3. Responda APENAS um JSON estrito no formato:
{"action": "CONFIRM" | "CANCEL" | "RESCHEDULE_LINK" | "UNKNOWN",
 "appointment_id": "id ou null",
 "reply": "Resposta curta e amigável em português confirmando a ação ou pedindo esclarecimento."}
"""


def build_summary_prompt(patient_name: str, notes: Sequence[ClinicalNote]) -> str:
    notes_text = "\n".join(
        f"[Data: {note.date.strftime('%d/%m/%Y')}] Nota: {note.content}" for note in notes
    )
    return f"Paciente: {patient_name}\n\nNotas:\n{notes_text}"


def build_command_prompt(
    message: str,
    appointments: Sequence[AppointmentRecord],
    reference_instant: datetime,
) -> str:
    """Contexto enxuto: só id, paciente, data, hora e status de cada consulta."""
    relevant = [
        {
            "id": appt.id,
            "patient": appt.patient_name,
            "date": appt.date.isoformat(),
            "time": appt.time.strftime("%H:%M"),
            "status": str(appt.status),
        }
        for appt in appointments
    ]
    today = reference_instant.strftime("%d/%m/%Y")
    weekday = _WEEKDAYS[reference_instant.weekday()]
    return (
        f"Hoje é: {today} (Dia da semana: {weekday}).\n\n"
        f"Lista de Agendamentos Atuais:\n{json.dumps(relevant, ensure_ascii=False)}\n\n"
        f'Comando do Usuário: "{message}"'
    )
