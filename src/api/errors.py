"""Mapeamento de exceções de domínio/infra para respostas HTTP."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.errors import AgendaLookupError, ContactPhoneNotFoundError
from utils.errors import CorruptedRecordError, RecordStoreUnavailableError

logger = logging.getLogger(__name__)


async def _store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "record_store_unavailable",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "store_unavailable", "message": "Armazenamento indisponível."},
    )


async def _corrupted_record_handler(request: Request, exc: Exception) -> JSONResponse:
    key = getattr(exc, "key", "")
    logger.error("record_corrupted", extra={"path": request.url.path, "key": key})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "record_corrupted", "message": str(exc)},
    )


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "message": str(exc)},
    )


async def _missing_phone_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "contact_phone_not_found", "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordStoreUnavailableError, _store_unavailable_handler)
    app.add_exception_handler(CorruptedRecordError, _corrupted_record_handler)
    app.add_exception_handler(AgendaLookupError, _not_found_handler)
    app.add_exception_handler(ContactPhoneNotFoundError, _missing_phone_handler)
