"""Cliente OpenAI do assistente (resumo clínico e comandos da agenda).

Nenhum método levanta exceção: sem chave, erro de rede ou resposta fora do
formato, o chamador recebe uma mensagem fixa e o fallback é logado.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from openai import AsyncOpenAI, OpenAIError

from app.infra.ai._json import parse_json_object
from app.infra.ai.assistant_prompts import (
    COMMAND_SYSTEM_PROMPT,
    SUMMARY_SYSTEM_PROMPT,
    build_command_prompt,
    build_summary_prompt,
)
from app.observability import record_latency, record_token_usage
from app.protocols.assistant import AssistantCommand, AssistantProtocol, CommandAction
from config.logging import log_fallback
from config.settings.ai.openai import OpenAISettings, get_openai_settings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from app.domain.appointment import AppointmentRecord
    from app.domain.patient import ClinicalNote

logger = logging.getLogger(__name__)

NO_NOTES_MESSAGE = "Não há notas suficientes para gerar um resumo."
NO_KEY_SUMMARY_MESSAGE = "Chave de API não configurada (Simulação: Resumo indisponível)."
SUMMARY_ERROR_MESSAGE = (
    "Erro ao comunicar com o serviço de IA. Verifique sua conexão ou chave de API."
)
EMPTY_SUMMARY_MESSAGE = "Não foi possível gerar o resumo."
NO_KEY_COMMAND_REPLY = "IA não configurada. Por favor, configure a API KEY no ambiente."
COMMAND_ERROR_REPLY = "Desculpe, não consegui processar sua solicitação no momento."


class OpenAIAssistantClient(AssistantProtocol):
    """Implementação de AssistantProtocol sobre AsyncOpenAI."""

    __slots__ = ("_client", "_max_tokens", "_model")

    def __init__(
        self,
        *,
        settings: OpenAISettings | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        cfg = settings or get_openai_settings()
        self._model = cfg.model or "gpt-4o-mini"
        self._max_tokens = cfg.max_tokens
        if client is not None:
            self._client: AsyncOpenAI | None = client
        elif cfg.is_configured:
            self._client = AsyncOpenAI(api_key=cfg.api_key, timeout=cfg.timeout_seconds)
        else:
            self._client = None

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def summarize_notes(self, patient_name: str, notes: Sequence[ClinicalNote]) -> str:
        if not notes:
            return NO_NOTES_MESSAGE
        client = self._client
        if client is None:
            log_fallback(logger, "assistant_summary", reason="api_key_missing")
            return NO_KEY_SUMMARY_MESSAGE

        try:
            response = await self._complete(
                client,
                "summarize_notes",
                system_prompt=SUMMARY_SYSTEM_PROMPT,
                user_prompt=build_summary_prompt(patient_name, notes),
            )
        except OpenAIError as exc:
            logger.warning(
                "assistant_summary_error",
                extra={"error_type": type(exc).__name__},
            )
            log_fallback(logger, "assistant_summary", reason="openai_error")
            return SUMMARY_ERROR_MESSAGE

        content = _extract_content(response)
        if not content:
            log_fallback(logger, "assistant_summary", reason="empty_response")
            return EMPTY_SUMMARY_MESSAGE
        return content.strip()

    async def interpret_command(
        self,
        message: str,
        appointments: Sequence[AppointmentRecord],
        reference_instant: datetime,
    ) -> AssistantCommand:
        client = self._client
        if client is None:
            log_fallback(logger, "assistant_command", reason="api_key_missing")
            return AssistantCommand(action=CommandAction.UNKNOWN, reply=NO_KEY_COMMAND_REPLY)

        try:
            response = await self._complete(
                client,
                "interpret_command",
                system_prompt=COMMAND_SYSTEM_PROMPT,
                user_prompt=build_command_prompt(message, appointments, reference_instant),
                json_mode=True,
            )
        except OpenAIError as exc:
            logger.warning(
                "assistant_command_error",
                extra={"error_type": type(exc).__name__},
            )
            log_fallback(logger, "assistant_command", reason="openai_error")
            return AssistantCommand(action=CommandAction.UNKNOWN, reply=COMMAND_ERROR_REPLY)

        data = parse_json_object(_extract_content(response))
        if data is None:
            log_fallback(logger, "assistant_command", reason="parse_failed")
            return AssistantCommand(action=CommandAction.UNKNOWN, reply=COMMAND_ERROR_REPLY)

        known_ids = {appt.id for appt in appointments}
        return _command_from_payload(data, known_ids)

    async def _complete(
        self,
        client: AsyncOpenAI,
        operation: str,
        *,
        system_prompt: str,
        user_prompt: str,
        json_mode: bool = False,
    ) -> Any:
        kwargs: dict[str, Any] = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        started = time.perf_counter()
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.2,
            max_tokens=self._max_tokens,
            **kwargs,
        )
        record_latency("assistant", operation, (time.perf_counter() - started) * 1000)

        usage = getattr(response, "usage", None)
        if usage is not None:
            record_token_usage(
                "assistant",
                operation,
                prompt_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
                completion_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
            )
        return response


def _extract_content(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    return getattr(choices[0].message, "content", None)


def _command_from_payload(data: dict[str, Any], known_ids: set[str]) -> AssistantCommand:
    """Converte o JSON do modelo; acao desconhecida vira UNKNOWN."""
    try:
        action = CommandAction(str(data.get("action", "")).upper())
    except ValueError:
        action = CommandAction.UNKNOWN

    raw_id = data.get("appointment_id") or data.get("appointmentId")
    appointment_id = str(raw_id) if raw_id not in (None, "", "null") else None
    if appointment_id is not None and appointment_id not in known_ids:
        logger.info("assistant_command_unknown_id", extra={"component": "assistant_command"})
        appointment_id = None

    reply = str(data.get("reply") or "").strip() or COMMAND_ERROR_REPLY
    return AssistantCommand(action=action, reply=reply, appointment_id=appointment_id)
