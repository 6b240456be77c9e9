"""Configuração do pytest para o projeto Agenda Psi."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from api.dependencies import get_assistant, get_booking_url, get_clock, get_store  # noqa: E402
from api.errors import register_exception_handlers  # noqa: E402
from api.routes import create_api_router  # noqa: E402
from app.domain.scheduling import AvailabilityRule, SchedulingPolicy  # noqa: E402
from app.infra.stores import MemoryRecordStore  # noqa: E402
from tests.fakes.fake_assistant import FakeAssistant  # noqa: E402
from tests.fakes.fixed_clock import MONDAY_10AM  # noqa: E402

BOOKING_URL = "https://agenda.example.com/booking"


@pytest.fixture
def monday_10am():
    return MONDAY_10AM


@pytest.fixture
def weekday_rule() -> AvailabilityRule:
    """Seg-Sex 09:00-18:00, slots de 60 min."""
    return AvailabilityRule.model_validate(
        {
            "active_weekdays": [1, 2, 3, 4, 5],
            "daily_start": "09:00",
            "daily_end": "18:00",
            "slot_duration_minutes": 60,
        }
    )


@pytest.fixture
def default_policy() -> SchedulingPolicy:
    return SchedulingPolicy()


@pytest.fixture
def memory_store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def fake_assistant() -> FakeAssistant:
    return FakeAssistant()


@pytest.fixture
def api_app(memory_store: MemoryRecordStore, fake_assistant: FakeAssistant) -> FastAPI:
    """Rotas da API com store em memória, assistente fake e relógio fixo."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(create_api_router())
    app.dependency_overrides[get_store] = lambda: memory_store
    app.dependency_overrides[get_assistant] = lambda: fake_assistant
    app.dependency_overrides[get_clock] = lambda: MONDAY_10AM
    app.dependency_overrides[get_booking_url] = lambda: BOOKING_URL
    return app


@pytest.fixture
def client(api_app: FastAPI) -> TestClient:
    return TestClient(api_app)
