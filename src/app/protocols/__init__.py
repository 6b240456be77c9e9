"""Protocolos e contratos do core da aplicação."""

from .assistant import AssistantCommand, AssistantProtocol, CommandAction
from .record_store import RecordStoreProtocol

__all__ = [
    "AssistantCommand",
    "AssistantProtocol",
    "CommandAction",
    "RecordStoreProtocol",
]
