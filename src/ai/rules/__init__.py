"""Regras determinísticas do módulo AI (fallbacks)."""

from ai.rules.fallbacks import fallback_insights

__all__ = [
    "fallback_insights",
]
