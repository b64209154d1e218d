"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    FirestoreSettings,
    InsightsSettings,
    get_base_settings,
    get_firestore_settings,
    get_insights_settings,
)


class TestBaseSettings:
    """BaseSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("ENVIRONMENT", "SERVICE_NAME", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.service_name == "follow_insights"
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().is_production

    def test_debug_raises_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_base_settings().log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()
        assert any("LOG_LEVEL" in e for e in errors)


class TestFirestoreSettings:
    """FirestoreSettings."""

    def test_project_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FIRESTORE_PROJECT_ID", raising=False)
        monkeypatch.setenv("GCP_PROJECT", "gcp-proj")
        assert get_firestore_settings().project_id == "gcp-proj"

    def test_backend_lowercased(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_STORE_BACKEND", "Memory")
        assert get_firestore_settings().store_backend == "memory"

    def test_invalid_backend(self) -> None:
        errors = FirestoreSettings(store_backend="redis").validate()
        assert any("ANALYSIS_STORE_BACKEND" in e for e in errors)

    def test_firestore_requires_project(self) -> None:
        settings = FirestoreSettings(store_backend="firestore")
        assert settings.validate()
        assert settings.validate(gcp_project="p") == []

    def test_app_id_without_slash(self) -> None:
        assert FirestoreSettings(app_id="a/b").validate()


class TestAISettings:
    """InsightsSettings (conexão OpenAI e limites do resumo)."""

    def test_openai_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "k")
        monkeypatch.setenv("OPENAI_ENABLED", "false")
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "100")
        settings = get_insights_settings()

        assert settings.api_key == "k"
        assert not settings.enabled
        assert settings.max_tokens == 100

    def test_openai_enabled_without_key(self) -> None:
        errors = InsightsSettings(api_key="", enabled=True).validate()
        assert any("OPENAI_API_KEY" in e for e in errors)

    def test_insights_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSIGHTS_SAMPLE_LIMIT", "10")
        monkeypatch.setenv("INSIGHTS_MAX_ENTRIES", "5")
        settings = get_insights_settings()
        assert (settings.sample_limit, settings.max_entries) == (10, 5)

    def test_insights_validation(self) -> None:
        assert len(InsightsSettings(api_key="k", sample_limit=-1, max_entries=0).validate()) == 2
        assert InsightsSettings(api_key="k").validate() == []
        assert InsightsSettings(enabled=False).validate() == []
