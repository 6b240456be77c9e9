"""Testes de config.settings (leitura de env e validação)."""

from __future__ import annotations

import pytest

from config.settings.ai.openai import OpenAISettings, _load_openai_from_env
from config.settings.base.core import BaseSettings, _load_base_from_env
from config.settings.base.storage import StorageSettings, _load_storage_from_env
from config.settings.booking import _load_booking_from_env


class TestBaseSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("ENVIRONMENT", "SERVICE_NAME", "DEBUG", "LOG_LEVEL", "REDIS_URL"):
            monkeypatch.delenv(key, raising=False)

        settings = _load_base_from_env()

        assert settings.environment == "development"
        assert settings.service_name == "agenda-psi"
        assert settings.debug is False
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")

        assert _load_base_from_env().is_production

    def test_port_and_log_level_validated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        errors = _load_base_from_env().validate()

        assert "PORT fora do intervalo: 0" in errors
        assert "LOG_LEVEL inválido: VERBOSE" in errors

    def test_strict_validation_outside_development(self) -> None:
        assert BaseSettings(environment="staging").strict_validation
        assert not BaseSettings().strict_validation


class TestStorageSettings:
    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECORD_STORE_BACKEND", "REDIS")
        monkeypatch.setenv("RECORD_STORE_PREFIX", "clinic:")
        monkeypatch.setenv("RECORD_STORE_SEED", "false")

        settings = _load_storage_from_env()

        assert settings.backend == "redis"
        assert settings.key_prefix == "clinic:"
        assert settings.seed is False

    def test_memory_forbidden_outside_development(self) -> None:
        errors = StorageSettings(backend="memory").validate(BaseSettings(environment="production"))

        assert any("memory" in error for error in errors)

    def test_redis_requires_url(self) -> None:
        errors = StorageSettings(backend="redis").validate(BaseSettings(redis_url=""))

        assert errors == ["REDIS_URL não configurado mas RECORD_STORE_BACKEND=redis"]


class TestOpenAISettings:
    def test_enabled_without_key_is_invalid(self) -> None:
        settings = OpenAISettings(api_key="", enabled=True)

        assert settings.is_configured is False
        assert "OPENAI_API_KEY não configurado mas OPENAI_ENABLED=true" in settings.validate()

    def test_disabled_without_key_is_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("OPENAI_ENABLED", "false")

        settings = _load_openai_from_env()

        assert settings.validate() == []


def test_booking_settings_parse_origins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUBLIC_BOOKING_URL", "https://agenda.example.com/booking")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example.com, ,https://b.example.com")

    settings = _load_booking_from_env()

    assert settings.public_booking_url == "https://agenda.example.com/booking"
    assert settings.cors_allowed_origins == ["https://a.example.com", "https://b.example.com"]
