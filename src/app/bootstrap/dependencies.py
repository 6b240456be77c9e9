"""Factories de implementações concretas (store e assistente)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_redis_client
from app.infra.ai import OpenAIAssistantClient
from app.infra.stores import MemoryRecordStore, RedisRecordStore
from config.settings import get_base_settings, get_openai_settings, get_storage_settings

if TYPE_CHECKING:
    from app.infra.stores import JsonDocumentStore
    from app.protocols.assistant import AssistantProtocol
    from config.settings import StorageSettings

logger = logging.getLogger(__name__)


def create_record_store(settings: StorageSettings | None = None) -> JsonDocumentStore:
    """Cria store de registros conforme RECORD_STORE_BACKEND.

    - "memory": MemoryRecordStore (dev only)
    - "redis": RedisRecordStore (staging/production)
    """
    cfg = settings or get_storage_settings()

    if cfg.backend == "redis":
        store: JsonDocumentStore = RedisRecordStore(create_redis_client(), cfg.key_prefix)
        logger.info("record_store_created", extra={"backend": "redis"})
        return store

    if cfg.backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryRecordStore()
        logger.info("record_store_created", extra={"backend": "memory"})
        return store

    msg = f"RECORD_STORE_BACKEND inválido: {cfg.backend}"
    raise ValueError(msg)


def create_assistant_client() -> AssistantProtocol:
    """Cria o assistente OpenAI; sem chave ele responde só com fallbacks."""
    settings = get_openai_settings()
    client = OpenAIAssistantClient(settings=settings)
    logger.info(
        "assistant_client_created",
        extra={"configured": client.is_configured, "model": settings.model},
    )
    return client
