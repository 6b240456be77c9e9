"""Store em memória que registra se cada acesso rodou dentro do event loop."""

from __future__ import annotations

import asyncio

from app.infra.stores import MemoryRecordStore


def _inside_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class LoopTrackingStore(MemoryRecordStore):
    """Equivale ao MemoryRecordStore, mas anota cada leitura/escrita."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, bool]] = []

    def _read(self, key: str) -> str | None:
        self.calls.append((key, _inside_event_loop()))
        return super()._read(key)

    def _write(self, key: str, data: str) -> None:
        self.calls.append((key, _inside_event_loop()))
        super()._write(key, data)

    @property
    def calls_on_loop(self) -> list[str]:
        return [key for key, on_loop in self.calls if on_loop]
