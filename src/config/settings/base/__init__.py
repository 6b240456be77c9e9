"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.storage import (
    RecordStoreBackend,
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    "RecordStoreBackend",
    # Storage
    "StorageSettings",
    "get_base_settings",
    "get_storage_settings",
]
