"""Settings do store de registros (pacientes, consultas, configurações)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

RecordStoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class StorageSettings:
    """Configurações do store de registros.

    Attributes:
        backend: memory (dev/test) ou redis
        key_prefix: Namespace das chaves no Redis
        seed: Grava dados de demonstração quando o store está vazio
    """

    backend: RecordStoreBackend = "memory"
    key_prefix: str = "psi:"
    seed: bool = True

    def validate(self, base: BaseSettings) -> list[str]:
        errors: list[str] = []

        if self.backend not in {"memory", "redis"}:
            errors.append(f"RECORD_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("RECORD_STORE_BACKEND=memory proibido em staging/production")

        if self.backend == "redis" and not base.redis_url:
            errors.append("REDIS_URL não configurado mas RECORD_STORE_BACKEND=redis")

        return errors


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    backend_str = os.getenv("RECORD_STORE_BACKEND", "memory").lower()
    backend: RecordStoreBackend = "redis" if backend_str == "redis" else "memory"
    return StorageSettings(
        backend=backend,
        key_prefix=os.getenv("RECORD_STORE_PREFIX", "psi:"),
        seed=os.getenv("RECORD_STORE_SEED", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
