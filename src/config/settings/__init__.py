"""Agregador de settings do follow-insights.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    InsightsSettings,
    get_insights_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    StoreBackend,
    get_firestore_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    # AI
    "InsightsSettings",
    "StoreBackend",
    "get_base_settings",
    "get_firestore_settings",
    "get_insights_settings",
]
