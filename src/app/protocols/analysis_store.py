"""Protocolo para persistência de análises.

Define o contrato consumido pelo use case de análise. O núcleo
(normalizer/deriver) não conhece este contrato; quem persiste é o
chamador.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.relationships import (
        FollowerSnapshot,
        RelationshipResult,
        StoredAnalysis,
    )


class AnalysisStoreProtocol(ABC):
    """Contrato para armazenamento de resultados e fotos de seguidores.

    Invariantes:
        - owner_id é opaco (identidade vem do chamador)
        - Sem usernames em logs
        - Falha de escrita levanta AnalysisStoreError; falha de leitura
          retorna None
    """

    @abstractmethod
    async def save_analysis(
        self,
        owner_id: str,
        result: RelationshipResult,
        snapshot: FollowerSnapshot,
    ) -> None:
        """Persiste resultado e foto de seguidores numa única escrita atômica.

        O resultado substitui o anterior e recebe snapshot.captured_at como
        momento da análise; a foto é acrescentada ao histórico. Ou as duas
        escritas acontecem, ou nenhuma.

        Raises:
            AnalysisStoreError: Erro de persistência
        """

    @abstractmethod
    async def load_result(self, owner_id: str) -> StoredAnalysis | None:
        """Recupera o último resultado salvo, ou None."""

    @abstractmethod
    async def load_latest_follower_snapshot(
        self,
        owner_id: str,
    ) -> FollowerSnapshot | None:
        """Recupera a foto de seguidores mais recente, ou None."""


class AnalysisStoreError(Exception):
    """Erro de persistência em AnalysisStore."""
