"""Agregador de settings de infraestrutura GCP.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.firestore import (
    FirestoreSettings,
    StoreBackend,
    get_firestore_settings,
)

__all__ = [
    "FirestoreSettings",
    "StoreBackend",
    "get_firestore_settings",
]
