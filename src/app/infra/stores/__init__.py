"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - redis_record_store: Store de registros usando Redis (Upstash)
    - memory_stores: Store em memória para desenvolvimento/testes
    - seed: Dados de demonstração para ambientes locais
"""

from __future__ import annotations

from app.infra.stores._document_store import JsonDocumentStore
from app.infra.stores.memory_stores import MemoryRecordStore
from app.infra.stores.redis_record_store import RedisRecordStore

__all__ = [
    "JsonDocumentStore",
    # Memory (dev/test)
    "MemoryRecordStore",
    # Redis (Upstash)
    "RedisRecordStore",
]
