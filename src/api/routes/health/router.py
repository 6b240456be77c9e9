"""Endpoints de health check."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.dependencies import get_assistant, get_store
from app.protocols.assistant import AssistantProtocol
from app.protocols.record_store import RecordStoreProtocol
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: o processo está respondendo."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(
    store: Annotated[RecordStoreProtocol, Depends(get_store)],
    assistant: Annotated[AssistantProtocol, Depends(get_assistant)],
) -> JSONResponse:
    """Readiness probe: store acessível; assistente sem chave só degrada."""
    store_check = await _check_store(store)
    assistant_check = _check_assistant(assistant)
    ready = store_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "record_store": store_check.as_dict(),
            "assistant": assistant_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_store(store: Any) -> DependencyCheck:
    ping = getattr(store, "ping", None)
    if not callable(ping):
        return DependencyCheck(status="ok")
    started_at = time.perf_counter()
    try:
        alive = await asyncio.wait_for(asyncio.to_thread(ping), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
    if not alive:
        logger.warning("readiness_store_check_failed")
        return DependencyCheck(status="failed", latency_ms=latency_ms, error="ping_failed")
    return DependencyCheck(status="ok", latency_ms=latency_ms)


def _check_assistant(assistant: Any) -> DependencyCheck:
    if getattr(assistant, "is_configured", False):
        return DependencyCheck(status="ok")
    return DependencyCheck(status="degraded", error="not_configured")
