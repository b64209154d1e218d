"""Testes das factories do bootstrap."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.bootstrap import validate_runtime_settings
from app.bootstrap.dependencies import (
    create_analysis_store,
    create_analyze_lists_use_case,
    create_insights_client,
)
from app.infra.ai import OpenAIInsightsClient
from app.infra.stores import FirestoreAnalysisStore, MemoryAnalysisStore
from app.use_cases.analysis import AnalyzeListsUseCase
from config.settings import (
    BaseSettings,
    FirestoreSettings,
    InsightsSettings,
)


class TestCreateAnalysisStore:
    """create_analysis_store."""

    def test_memory_in_development(self) -> None:
        store = create_analysis_store(
            FirestoreSettings(), BaseSettings(environment="development")
        )
        assert isinstance(store, MemoryAnalysisStore)

    def test_firestore_outside_development(self) -> None:
        factory = MagicMock()
        store = create_analysis_store(
            FirestoreSettings(project_id="proj", app_id="app"),
            BaseSettings(environment="production"),
            client_factory=factory,
        )

        assert isinstance(store, FirestoreAnalysisStore)
        factory.assert_called_once_with("proj")

    def test_explicit_backend_wins(self) -> None:
        store = create_analysis_store(
            FirestoreSettings(store_backend="memory"),
            BaseSettings(environment="staging"),
        )
        assert isinstance(store, MemoryAnalysisStore)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="ANALYSIS_STORE_BACKEND"):
            create_analysis_store(FirestoreSettings(store_backend="redis"), BaseSettings())


class TestCreateInsightsClient:
    """create_insights_client."""

    def test_disabled(self) -> None:
        assert create_insights_client(InsightsSettings(enabled=False)) is None

    def test_enabled(self) -> None:
        client = create_insights_client(InsightsSettings(api_key="k"))
        assert isinstance(client, OpenAIInsightsClient)


class TestCreateUseCase:
    """create_analyze_lists_use_case."""

    def test_wiring(self) -> None:
        store = MemoryAnalysisStore()

        use_case = create_analyze_lists_use_case(
            store=store, insights_settings=InsightsSettings(enabled=False, sample_limit=7)
        )

        assert isinstance(use_case, AnalyzeListsUseCase)
        assert use_case._store is store
        assert use_case._insights_client is None
        assert use_case._insights_sample_limit == 7


class TestValidateRuntimeSettings:
    """validate_runtime_settings."""

    def test_strict_env_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("OPENAI_ENABLED", "true")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
            validate_runtime_settings()

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("OPENAI_ENABLED", "true")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        validate_runtime_settings()

    def test_disabled_insights_not_validated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem OpenAI habilitado, chave e limites de insights não bloqueiam."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("ANALYSIS_STORE_BACKEND", raising=False)
        monkeypatch.setenv("OPENAI_ENABLED", "false")
        monkeypatch.setenv("INSIGHTS_MAX_ENTRIES", "0")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        validate_runtime_settings()


class TestCreateFirestoreClient:
    """create_firestore_client."""

    def test_sdk_failure_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from google.cloud import firestore

        from app.bootstrap.clients import create_firestore_client
        from utils.errors import FirestoreUnavailableError

        create_firestore_client.cache_clear()
        monkeypatch.setattr(
            firestore, "Client", MagicMock(side_effect=RuntimeError("no credentials"))
        )
        try:
            with pytest.raises(FirestoreUnavailableError):
                create_firestore_client("proj")
        finally:
            create_firestore_client.cache_clear()


class TestBootstrapEntryPoints:
    """initialize_test_app e singleton do use case."""

    def test_initialize_and_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import logging

        from app.bootstrap import get_analyze_lists_use_case, initialize_test_app

        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("OPENAI_ENABLED", "false")
        monkeypatch.delenv("ANALYSIS_STORE_BACKEND", raising=False)
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        get_analyze_lists_use_case.cache_clear()
        try:
            initialize_test_app()
            assert root.level == logging.DEBUG

            use_case = get_analyze_lists_use_case()
            assert use_case is get_analyze_lists_use_case()
            assert isinstance(use_case._store, MemoryAnalysisStore)
        finally:
            get_analyze_lists_use_case.cache_clear()
            root.handlers = handlers
            root.setLevel(level)
