"""Store em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.infra.stores._document_store import JsonDocumentStore


class MemoryRecordStore(JsonDocumentStore):
    """Store de registros em memória, apenas para dev/test.

    Guarda documentos serializados (e não objetos) para reproduzir o
    comportamento de um store chave-valor real, inclusive cópias isoladas
    a cada leitura.
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def _read(self, key: str) -> str | None:
        return self._store.get(key)

    def _write(self, key: str, data: str) -> None:
        self._store[key] = data

    def clear(self) -> None:
        """Remove todos os documentos (apenas para testes)."""
        self._store.clear()

    def ping(self) -> bool:
        return True
