"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - firestore_analysis_store: Store de análises usando Firestore
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_analysis_store import FirestoreAnalysisStore
from app.infra.stores.memory_stores import MemoryAnalysisStore

__all__ = [
    # Firestore
    "FirestoreAnalysisStore",
    # Memory (dev/test)
    "MemoryAnalysisStore",
]
