"""Agregador de settings da Agenda Psi.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    OpenAISettings,
    get_openai_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    RecordStoreBackend,
    StorageSettings,
    get_base_settings,
    get_storage_settings,
)

# Booking settings
from config.settings.booking import (
    BookingSettings,
    get_booking_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    # Booking
    "BookingSettings",
    "Environment",
    # AI
    "OpenAISettings",
    "RecordStoreBackend",
    "StorageSettings",
    "get_base_settings",
    "get_booking_settings",
    "get_openai_settings",
    "get_storage_settings",
]
