"""Factories de clientes externos: Firestore."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def create_firestore_client(project_id: str = "") -> FirestoreClient:
    """Cria cliente Firestore (um por projeto).

    Args:
        project_id: Projeto GCP; vazio usa o projeto das credenciais padrão.

    Returns:
        Cliente Firestore

    Raises:
        FirestoreUnavailableError: SDK não conseguiu criar o cliente
            (ex: credenciais ausentes).
    """
    from google.cloud import firestore

    try:
        client = firestore.Client(project=project_id or None)
    except Exception as e:
        logger.error(
            "firestore_client_error",
            extra={"error_type": type(e).__name__, "project": project_id or "default"},
        )
        raise FirestoreUnavailableError(f"Firestore indisponível: {e}") from e

    logger.info("firestore_client_created", extra={"project": project_id or "default"})
    return client
