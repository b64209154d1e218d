"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.relationships import StoredAnalysis
from app.protocols.analysis_store import AnalysisStoreProtocol

if TYPE_CHECKING:
    from app.domain.relationships import FollowerSnapshot, RelationshipResult


class MemoryAnalysisStore(AnalysisStoreProtocol):
    """Store de análises em memória: apenas para dev/test."""

    def __init__(self, max_snapshots: int = 100) -> None:
        self._results: dict[str, StoredAnalysis] = {}
        self._snapshots: dict[str, list[FollowerSnapshot]] = {}
        self._max_snapshots = max_snapshots

    async def save_analysis(
        self,
        owner_id: str,
        result: RelationshipResult,
        snapshot: FollowerSnapshot,
    ) -> None:
        # Limita tamanho para evitar memory leak em dev
        snapshots = [*self._snapshots.get(owner_id, ()), snapshot][-self._max_snapshots :]
        stored = StoredAnalysis(result=result, captured_at=snapshot.captured_at)
        # Sem await entre as atribuições: nenhuma outra task vê o meio do caminho
        self._results[owner_id] = stored
        self._snapshots[owner_id] = snapshots

    async def load_result(self, owner_id: str) -> StoredAnalysis | None:
        return self._results.get(owner_id)

    async def load_latest_follower_snapshot(
        self,
        owner_id: str,
    ) -> FollowerSnapshot | None:
        snapshots = self._snapshots.get(owner_id)
        if not snapshots:
            return None
        return max(snapshots, key=lambda s: s.captured_at)

    def get_snapshots(self, owner_id: str) -> list[FollowerSnapshot]:
        """Retorna todas as fotos salvas (apenas para testes)."""
        return list(self._snapshots.get(owner_id, []))
