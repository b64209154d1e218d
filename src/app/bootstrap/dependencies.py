"""Factories de stores, clientes de IA e use cases.

Toda configuração entra explicitamente por parâmetro; os getters de
settings só são usados como padrão.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_firestore_client
from app.infra.ai import OpenAIInsightsClient
from app.infra.stores import FirestoreAnalysisStore, MemoryAnalysisStore
from app.use_cases.analysis import AnalyzeListsUseCase
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_insights_settings,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from google.cloud.firestore import Client as FirestoreClient

    from app.protocols import AnalysisStoreProtocol, InsightsClientProtocol
    from config.settings import (
        BaseSettings,
        FirestoreSettings,
        InsightsSettings,
    )

logger = logging.getLogger(__name__)


def _default_backend_for_env(environment: str) -> str:
    return "memory" if environment == "development" else "firestore"


def create_analysis_store(
    firestore_settings: FirestoreSettings | None = None,
    base_settings: BaseSettings | None = None,
    client_factory: Callable[[str], FirestoreClient] = create_firestore_client,
) -> AnalysisStoreProtocol:
    """Cria store de análises baseado na configuração.

    Raises:
        ValueError: Backend desconhecido
    """
    firestore_settings = firestore_settings or get_firestore_settings()
    base_settings = base_settings or get_base_settings()
    environment = base_settings.environment
    backend = firestore_settings.store_backend or _default_backend_for_env(environment)

    if backend == "firestore":
        client = client_factory(firestore_settings.project_id)
        store: AnalysisStoreProtocol = FirestoreAnalysisStore(
            client, app_id=firestore_settings.app_id
        )
        logger.info("analysis_store_created", extra={"backend": "firestore"})
        return store

    if backend == "memory":
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("analysis_store_created", extra={"backend": "memory"})
        return MemoryAnalysisStore()

    msg = f"ANALYSIS_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_insights_client(
    insights_settings: InsightsSettings | None = None,
) -> InsightsClientProtocol | None:
    """Cria cliente de insights, ou None se a integração estiver desabilitada."""
    insights_settings = insights_settings or get_insights_settings()
    if not insights_settings.enabled:
        logger.info("insights_client_disabled")
        return None
    return OpenAIInsightsClient(settings=insights_settings)


def create_analyze_lists_use_case(
    store: AnalysisStoreProtocol | None = None,
    insights_client: InsightsClientProtocol | None = None,
    insights_settings: InsightsSettings | None = None,
) -> AnalyzeListsUseCase:
    """Monta AnalyzeListsUseCase com as dependências configuradas."""
    insights_settings = insights_settings or get_insights_settings()
    return AnalyzeListsUseCase(
        store=store or create_analysis_store(),
        insights_client=insights_client or create_insights_client(
            insights_settings=insights_settings
        ),
        insights_sample_limit=insights_settings.sample_limit,
    )
