"""Entrypoint da aplicação Agenda Psi.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8000  (ou: agenda-psi)
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_clock
from api.errors import register_exception_handlers
from api.routes import create_api_router
from app.bootstrap import get_record_store, initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_booking_settings, get_storage_settings
from utils.errors import RecordStoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Logging configurado antes de qualquer log de import
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: valida settings e popula o store vazio (quando habilitado)."""
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    if get_storage_settings().seed:
        try:
            get_record_store().seed_if_empty(get_clock())
        except RecordStoreUnavailableError as exc:
            logger.warning("record_store_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": service})


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga X-Correlation-ID e registra latência por rota."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    started = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        record_latency("http", request.url.path, (time.perf_counter() - started) * 1000)
        reset_correlation_id(token)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="Agenda Psi",
        description="Agenda de consultas e agendamento público para profissional autônomo",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    origins = get_booking_settings().cors_allowed_origins or ["*"]
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})
    return fastapi_app


app = create_app()


def main() -> None:
    """Execução direta (desenvolvimento)."""
    import uvicorn

    base = get_base_settings()
    logger.info("server_starting", extra={"host": base.host, "port": base.port})
    uvicorn.run("app.app:app", host=base.host, port=base.port, reload=base.is_development)


if __name__ == "__main__":
    main()
