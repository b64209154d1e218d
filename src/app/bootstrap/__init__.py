"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_analyze_lists_use_case

    initialize_app()
    use_case = get_analyze_lists_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging, configure_logging_from_settings
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_insights_settings,
)

if TYPE_CHECKING:
    from app.use_cases.analysis import AnalyzeListsUseCase

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação: logging JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    configure_logging_from_settings(
        get_base_settings(),
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"firestore: {error}" for error in get_firestore_settings().validate())
    insights = get_insights_settings()
    if insights.enabled:
        errors.extend(f"insights: {error}" for error in insights.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_analyze_lists_use_case() -> AnalyzeListsUseCase:
    """Obtém AnalyzeListsUseCase configurado conforme env (singleton)."""
    from app.bootstrap.dependencies import create_analyze_lists_use_case

    return create_analyze_lists_use_case()
