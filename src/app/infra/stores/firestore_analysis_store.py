"""Firestore Analysis Store: resultado da última análise e fotos de seguidores.

Estrutura no Firestore:
    artifacts/{app_id}/users/{owner_id}/instagramData/results
    artifacts/{app_id}/users/{owner_id}/snapshots/{iso_timestamp}
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.relationships import FollowerSnapshot, RelationshipResult, StoredAnalysis
from app.protocols.analysis_store import AnalysisStoreError, AnalysisStoreProtocol

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.firestore import DocumentReference

logger = logging.getLogger(__name__)

ARTIFACTS_COLLECTION = "artifacts"
USERS_COLLECTION = "users"
RESULTS_COLLECTION = "instagramData"
RESULTS_DOCUMENT = "results"
SNAPSHOTS_COLLECTION = "snapshots"


class FirestoreAnalysisStore(AnalysisStoreProtocol):
    """Store de análises usando Firestore.

    Usa asyncio.to_thread pois o SDK Firestore é síncrono.

    Args:
        firestore_client: Cliente Firestore
        app_id: Namespace dos documentos (FIRESTORE_APP_ID)
    """

    def __init__(self, firestore_client: FirestoreClient, app_id: str) -> None:
        self._db = firestore_client
        self._app_id = app_id

    def _user_document(self, owner_id: str) -> DocumentReference:
        if not owner_id or "/" in owner_id:
            raise ValueError("owner_id deve ser não vazio e sem '/'")
        return (
            self._db.collection(ARTIFACTS_COLLECTION)
            .document(self._app_id)
            .collection(USERS_COLLECTION)
            .document(owner_id)
        )

    async def save_analysis(
        self,
        owner_id: str,
        result: RelationshipResult,
        snapshot: FollowerSnapshot,
    ) -> None:
        await asyncio.to_thread(self._save_analysis_sync, owner_id, result, snapshot)

    def _save_analysis_sync(
        self,
        owner_id: str,
        result: RelationshipResult,
        snapshot: FollowerSnapshot,
    ) -> None:
        user_doc = self._user_document(owner_id)
        result_ref = user_doc.collection(RESULTS_COLLECTION).document(RESULTS_DOCUMENT)
        snapshot_ref = user_doc.collection(SNAPSHOTS_COLLECTION).document(
            snapshot.captured_at.isoformat()
        )
        result_data: dict[str, Any] = {
            **result.to_dict(),
            "counts": result.counts(),
            "timestamp": snapshot.captured_at,
        }

        # Resultado e foto no mesmo commit: nunca um sem o outro
        batch = self._db.batch()
        batch.set(result_ref, result_data)
        batch.set(snapshot_ref, snapshot.to_dict())
        try:
            batch.commit()
        except Exception as e:
            logger.error(
                "analysis_save_error",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            raise AnalysisStoreError(f"Erro ao persistir análise: {e}") from e

        logger.debug(
            "analysis_saved",
            extra={
                "counts": result.counts(),
                "follower_count": len(snapshot.usernames),
            },
        )

    async def load_result(self, owner_id: str) -> StoredAnalysis | None:
        return await asyncio.to_thread(self._load_result_sync, owner_id)

    def _load_result_sync(self, owner_id: str) -> StoredAnalysis | None:
        doc_ref = (
            self._user_document(owner_id)
            .collection(RESULTS_COLLECTION)
            .document(RESULTS_DOCUMENT)
        )
        try:
            doc = doc_ref.get()
            if not doc.exists:
                return None
            data = doc.to_dict() or {}
        except Exception as e:
            logger.error(
                "analysis_result_load_error",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            return None

        stored = StoredAnalysis(
            result=RelationshipResult.from_dict(data),
            captured_at=data.get("timestamp"),
        )
        logger.debug("analysis_result_loaded", extra={"counts": stored.result.counts()})
        return stored

    async def load_latest_follower_snapshot(
        self,
        owner_id: str,
    ) -> FollowerSnapshot | None:
        return await asyncio.to_thread(self._load_latest_follower_snapshot_sync, owner_id)

    def _load_latest_follower_snapshot_sync(
        self,
        owner_id: str,
    ) -> FollowerSnapshot | None:
        query = (
            self._user_document(owner_id)
            .collection(SNAPSHOTS_COLLECTION)
            .order_by("createdAt", direction="DESCENDING")
            .limit(1)
        )
        try:
            for doc in query.stream():
                return FollowerSnapshot.from_dict(doc.to_dict() or {})
        except Exception as e:
            logger.error(
                "follower_snapshot_load_error",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
        return None
