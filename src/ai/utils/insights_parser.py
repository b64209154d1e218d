"""Parser da resposta do InsightsAgent."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ai.models.insights import InsightEntry, InsightSummary
from ai.rules.fallbacks import fallback_insights
from ai.utils._json_extractor import extract_json_from_response

logger = logging.getLogger(__name__)


def parse_insights_response(raw_response: str, max_insights: int) -> InsightSummary:
    """Converte resposta bruta em InsightSummary.

    Entradas inválidas são descartadas individualmente. Sem nenhum JSON
    utilizável, retorna fallback.

    Args:
        raw_response: Texto retornado pela LLM
        max_insights: Máximo de insights mantidos

    Returns:
        InsightSummary (fallback_used=True se nada pôde ser lido)
    """
    data = extract_json_from_response(raw_response)
    if data is None:
        return fallback_insights("parse_error")

    raw_entries = data.get("insights")
    if not isinstance(raw_entries, list):
        return fallback_insights("missing_insights_field")

    entries: list[InsightEntry] = []
    for raw_entry in raw_entries:
        try:
            entries.append(InsightEntry.model_validate(raw_entry))
        except ValidationError:
            continue
        if len(entries) >= max_insights:
            break

    dropped = len(raw_entries) - len(entries)
    if dropped > 0:
        logger.debug("insights_entries_dropped", extra={"dropped": dropped})

    return InsightSummary(entries=tuple(entries))
