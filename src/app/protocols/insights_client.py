"""Protocolo para o cliente de resumo de insights."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ai.models.insights import InsightRequest, InsightSummary


@runtime_checkable
class InsightsClientProtocol(Protocol):
    """Contrato para geração de insights a partir de amostras de usernames.

    Implementações nunca levantam exceção: falhas viram fallback.
    """

    async def summarize(self, request: InsightRequest) -> InsightSummary:
        """Gera resumo curto de insights."""
        ...

    async def close(self) -> None:
        """Libera recursos (cliente HTTP)."""
        ...
