"""Amostragem de usernames para o resumo por IA.

Determinística: os primeiros N de cada lista, na ordem da lista.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ai.models.insights import InsightRequest

if TYPE_CHECKING:
    from app.domain.relationships import RelationshipResult


def sample_usernames(result: RelationshipResult, limit: int) -> InsightRequest:
    """Monta InsightRequest com até `limit` usernames de cada lista.

    Raises:
        ValueError: Se limit for negativo.
    """
    if limit < 0:
        raise ValueError("limit deve ser >= 0")
    return InsightRequest(
        non_reciprocal_following=tuple(
            r.username for r in result.non_reciprocal_following[:limit]
        ),
        mutuals=tuple(r.username for r in result.mutuals[:limit]),
        counts=result.counts(),
    )
