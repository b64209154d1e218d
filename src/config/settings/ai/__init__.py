"""Agregador de settings de AI/LLM.

Re-exporta todas as settings de IA para uso externo.
"""

from __future__ import annotations

from config.settings.ai.insights import (
    InsightsSettings,
    get_insights_settings,
)

__all__ = [
    "InsightsSettings",
    "get_insights_settings",
]
