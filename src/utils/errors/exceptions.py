"""Exceções de infraestrutura para falhas recuperáveis de persistência."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RecordStoreUnavailableError(InfrastructureError):
    """Falha de conexão/timeout ao acessar o store de registros."""


class CorruptedRecordError(InfrastructureError):
    """Documento salvo não pôde ser decodificado."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Registro corrompido na chave {key}")
        self.key = key
