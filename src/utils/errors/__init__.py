"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CorruptedRecordError,
    InfrastructureError,
    RecordStoreUnavailableError,
)

__all__ = [
    "CorruptedRecordError",
    "InfrastructureError",
    "RecordStoreUnavailableError",
]
