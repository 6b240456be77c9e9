"""Implementações concretas de IO para IA (OpenAI)."""

from app.infra.ai.assistant_client import OpenAIAssistantClient

__all__ = ["OpenAIAssistantClient"]
