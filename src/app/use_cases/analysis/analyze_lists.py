"""Use case de análise de listas exportadas.

Fluxo: normalizar (categorias em paralelo) → validar listas obrigatórias
→ derivar relacionamentos → comparar com a foto anterior de seguidores
→ persistir → (opcional) resumo de insights.

O núcleo (normalize/derive) é puro; IO fica todo aqui, via protocolos.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.normalizers.export_lists import normalize_input
from app.domain.relationships import FollowerSnapshot
from app.domain.user_record import REQUIRED_CATEGORIES, ListCategory, NormalizedList
from app.observability import reset_correlation_id, set_correlation_id
from app.services import compare_follower_snapshots, derive, sample_usernames
from utils.errors import MissingRequiredListsError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ai.models.insights import InsightSummary
    from app.domain.relationships import FollowerChange, RelationshipResult, StoredAnalysis
    from app.domain.user_record import RawInput
    from app.protocols import AnalysisStoreProtocol, InsightsClientProtocol

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Resultado de uma execução de análise.

    Atributos:
        result: Conjuntos derivados
        captured_at: Momento da análise (persistido junto ao resultado)
        follower_change: Diferença para a foto anterior (None na primeira análise)
        insights: Resumo da LLM (None quando não solicitado/configurado)
    """

    result: RelationshipResult
    captured_at: datetime
    follower_change: FollowerChange | None = None
    insights: InsightSummary | None = None


class AnalyzeListsUseCase:
    """Orquestra normalização, derivação, persistência e insights."""

    def __init__(
        self,
        *,
        store: AnalysisStoreProtocol,
        insights_client: InsightsClientProtocol | None = None,
        insights_sample_limit: int = 50,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._insights_client = insights_client
        self._insights_sample_limit = insights_sample_limit
        self._clock = clock

    async def execute(
        self,
        owner_id: str,
        raw_inputs: Iterable[RawInput],
        *,
        with_insights: bool = False,
    ) -> AnalysisReport:
        """Executa uma análise completa.

        Args:
            owner_id: Identificador opaco do dono dos dados
            raw_inputs: Um RawInput por categoria fornecida
            with_insights: Solicita resumo da LLM

        Returns:
            AnalysisReport da execução

        Raises:
            ValueError: Categoria repetida em raw_inputs
            MissingRequiredListsError: followers ou following vazios
            AnalysisStoreError: Falha ao persistir
        """
        token = set_correlation_id()
        try:
            return await self._execute(owner_id, raw_inputs, with_insights)
        finally:
            reset_correlation_id(token)

    async def _execute(
        self,
        owner_id: str,
        raw_inputs: Iterable[RawInput],
        with_insights: bool,
    ) -> AnalysisReport:
        lists = await self._normalize_all(raw_inputs)
        logger.info(
            "lists_normalized",
            extra={"record_counts": {c.value: len(lst) for c, lst in lists.items()}},
        )

        missing = [c.value for c in REQUIRED_CATEGORIES if not lists.get(c)]
        if missing:
            logger.info("analysis_rejected", extra={"missing_categories": missing})
            raise MissingRequiredListsError(missing)

        followers = lists[ListCategory.FOLLOWERS]
        result = derive(
            followers,
            lists[ListCategory.FOLLOWING],
            pending=lists.get(ListCategory.PENDING),
            blocked=lists.get(ListCategory.BLOCKED),
            unfollowed=lists.get(ListCategory.UNFOLLOWED),
        )

        captured_at = self._clock()
        previous = await self._store.load_latest_follower_snapshot(owner_id)
        follower_change = (
            compare_follower_snapshots(previous, followers) if previous is not None else None
        )

        await self._store.save_analysis(
            owner_id,
            result,
            FollowerSnapshot(captured_at=captured_at, usernames=followers.usernames),
        )

        insights = None
        if with_insights:
            insights = await self._summarize(result)

        logger.info(
            "analysis_completed",
            extra={
                "counts": result.counts(),
                "lost_followers": len(follower_change.lost) if follower_change else None,
                "gained_followers": len(follower_change.gained) if follower_change else None,
                "insights_fallback": insights.fallback_used if insights else None,
            },
        )
        return AnalysisReport(
            result=result,
            captured_at=captured_at,
            follower_change=follower_change,
            insights=insights,
        )

    async def restore(self, owner_id: str) -> StoredAnalysis | None:
        """Recupera o último resultado persistido (restauração de sessão)."""
        stored = await self._store.load_result(owner_id)
        logger.debug("analysis_restored", extra={"found": stored is not None})
        return stored

    async def _normalize_all(
        self,
        raw_inputs: Iterable[RawInput],
    ) -> dict[ListCategory, NormalizedList]:
        raws = list(raw_inputs)
        seen: set[ListCategory] = set()
        for raw in raws:
            if raw.category in seen:
                raise ValueError(f"Categoria duplicada: {raw.category.value}")
            seen.add(raw.category)

        # Cada normalização é independente; sem estado compartilhado
        normalized = await asyncio.gather(
            *(asyncio.to_thread(normalize_input, raw) for raw in raws)
        )
        return {lst.category: lst for lst in normalized}

    async def _summarize(self, result: RelationshipResult) -> InsightSummary | None:
        if self._insights_client is None:
            logger.debug("insights_client_not_configured")
            return None
        request = sample_usernames(result, self._insights_sample_limit)
        return await self._insights_client.summarize(request)
