"""Cliente OpenAI do InsightsAgent.

Implementa InsightsClientProtocol com chamadas reais à API OpenAI.
Configuração recebida na construção; nada de estado global.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import httpx

from ai.prompts.insights_prompt import (
    format_insights_system_prompt,
    format_insights_user_prompt,
)
from ai.rules.fallbacks import fallback_insights
from ai.utils.insights_parser import parse_insights_response
from app.infra.ai._openai_http import call_openai_api
from config.logging import log_fallback

if TYPE_CHECKING:
    from ai.models.insights import InsightRequest, InsightSummary
    from config.settings.ai import InsightsSettings

logger = logging.getLogger(__name__)

_POINT_NAME = "insights_agent"


class OpenAIInsightsClient:
    """Cliente OpenAI para resumo de insights.

    Usa httpx para requests async. Fallback seguro em caso de erro:
    summarize nunca levanta exceção.
    """

    __slots__ = ("_http_client", "_owns_http_client", "_settings")

    def __init__(
        self,
        settings: InsightsSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client
        self._owns_http_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
            self._owns_http_client = True
        return self._http_client

    async def summarize(self, request: InsightRequest) -> InsightSummary:
        """Gera insights a partir da amostra de usernames."""
        if not self._settings.enabled:
            return self._fallback("openai_disabled")

        if not request.non_reciprocal_following and not request.mutuals:
            return self._fallback("empty_sample")

        started = time.perf_counter()
        client = await self._get_http_client()
        raw_response = await call_openai_api(
            http_client=client,
            api_key=self._settings.api_key,
            settings=self._settings,
            system_prompt=format_insights_system_prompt(self._settings.max_entries),
            user_prompt=format_insights_user_prompt(request),
            point_name=_POINT_NAME,
        )
        elapsed_ms = (time.perf_counter() - started) * 1000

        if raw_response is None:
            return self._fallback("openai_call_failed", elapsed_ms)

        summary = parse_insights_response(raw_response, self._settings.max_entries)
        if summary.fallback_used:
            log_fallback(logger, _POINT_NAME, reason=summary.reason, elapsed_ms=elapsed_ms)
        return summary

    def _fallback(self, reason: str, elapsed_ms: float | None = None) -> InsightSummary:
        log_fallback(logger, _POINT_NAME, reason=reason, elapsed_ms=elapsed_ms)
        return fallback_insights(reason)

    async def close(self) -> None:
        """Fecha cliente HTTP (apenas se foi criado aqui)."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
        self._http_client = None
