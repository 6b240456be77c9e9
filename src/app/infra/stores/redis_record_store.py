"""Redis Record Store: documentos JSON por coleção.

Cada coleção ocupa uma chave com namespace (ex.: `psi:appointments`).
Falhas de conexão são convertidas em RecordStoreUnavailableError para que
a camada HTTP responda 503 sem conhecer o cliente Redis.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.infra.stores._document_store import JsonDocumentStore
from utils.errors import RecordStoreUnavailableError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

# Prefixo padrão para namespace dos documentos
DEFAULT_KEY_PREFIX = "psi:"


class RedisRecordStore(JsonDocumentStore):
    """Store de registros usando Redis (Upstash compatível).

    Args:
        redis_client: Cliente Redis síncrono
        key_prefix: Namespace aplicado a todas as chaves
    """

    def __init__(self, redis_client: Redis[bytes], key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{key}"

    def _read(self, key: str) -> bytes | None:
        try:
            return self._redis.get(self._key(key))
        except RedisError as exc:
            logger.warning(
                "record_store_read_failed",
                extra={"key": key, "error_type": type(exc).__name__},
            )
            raise RecordStoreUnavailableError(str(exc)) from exc

    def _write(self, key: str, data: str) -> None:
        try:
            self._redis.set(self._key(key), data)
        except RedisError as exc:
            logger.warning(
                "record_store_write_failed",
                extra={"key": key, "error_type": type(exc).__name__},
            )
            raise RecordStoreUnavailableError(str(exc)) from exc
        logger.debug("record_saved", extra={"key": key})

    def ping(self) -> bool:
        """Verifica conectividade (usado pelo readiness)."""
        try:
            return bool(self._redis.ping())
        except RedisError:
            return False
