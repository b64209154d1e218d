"""Settings do Firestore.

Configurações para Google Cloud Firestore e escolha do backend de store.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

StoreBackend = Literal["firestore", "memory"]

VALID_STORE_BACKENDS = frozenset({"firestore", "memory"})


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        app_id: Namespace dos documentos (artifacts/{app_id}/users/...)
        store_backend: Backend do store de análises (firestore|memory);
            vazio = escolhido pelo ambiente
    """

    project_id: str = ""
    app_id: str = "default-app-id"
    store_backend: str = ""

    def validate(self, gcp_project: str = "") -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.store_backend and self.store_backend not in VALID_STORE_BACKENDS:
            errors.append(f"ANALYSIS_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "firestore" and not (self.project_id or gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")

        if not self.app_id or "/" in self.app_id:
            errors.append("FIRESTORE_APP_ID deve ser não vazio e sem '/'")

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv(
            "FIRESTORE_PROJECT_ID",
            os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        ),
        app_id=os.getenv("FIRESTORE_APP_ID", "default-app-id"),
        store_backend=os.getenv("ANALYSIS_STORE_BACKEND", "").lower(),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
