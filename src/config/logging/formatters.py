"""Formatter JSON (python-json-logger) com campos padronizados.

Exemplo de linha:
    {"asctime": "2026-10-19 10:30:00,120", "level": "INFO",
     "logger": "app.services.booking_service", "message": "booking_created",
     "correlation_id": "c0ffee", "service": "agenda-psi",
     "appointment_id": "3f9a1c2b7d4e"}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """JsonFormatter com os campos obrigatórios, na ordem acima."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
