"""Fallbacks determinísticos para quando a LLM falha.

Garante resultado previsível: a análise nunca quebra por causa do resumo.
"""

from __future__ import annotations

from ai.models.insights import InsightSummary


def fallback_insights(reason: str | None = None) -> InsightSummary:
    """Fallback para o InsightsAgent.

    Usado quando:
    - API key ausente ou integração desabilitada
    - LLM timeout / erro HTTP
    - Resposta sem JSON utilizável

    Args:
        reason: Motivo do fallback (sem PII)

    Returns:
        InsightSummary vazio com fallback_used=True
    """
    return InsightSummary(
        entries=(),
        fallback_used=True,
        reason=reason or "llm_unavailable",
    )
