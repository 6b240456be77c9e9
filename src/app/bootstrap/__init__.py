"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_record_store

    initialize_app()
    store = get_record_store()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_booking_settings,
    get_openai_settings,
    get_storage_settings,
)

if TYPE_CHECKING:
    from app.infra.stores import JsonDocumentStore
    from app.protocols.assistant import AssistantProtocol

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no início."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG" if base.debug else base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.
    """
    base = get_base_settings()
    strict_mode = base.strict_validation
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"storage: {error}" for error in get_storage_settings().validate(base))
    errors.extend(f"openai: {error}" for error in get_openai_settings().validate())

    if strict_mode and not get_booking_settings().public_booking_url.startswith("https://"):
        errors.append("booking: PUBLIC_BOOKING_URL deve usar https")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_record_store() -> JsonDocumentStore:
    """Store de registros (singleton)."""
    from app.bootstrap.dependencies import create_record_store

    return create_record_store()


@lru_cache(maxsize=1)
def get_assistant_client() -> AssistantProtocol:
    """Assistente de IA (singleton)."""
    from app.bootstrap.dependencies import create_assistant_client

    return create_assistant_client()
