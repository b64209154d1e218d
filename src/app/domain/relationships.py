"""Resultados derivados da comparação entre listas.

RelationshipResult é calculado uma vez por análise e nunca mutado.
FollowerSnapshot/FollowerChange guardam a foto de seguidores de cada
análise para detectar quem deixou de seguir entre uploads.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime  # noqa: TC003 - usado em runtime nos dataclasses
from typing import Any

from app.domain.user_record import UserRecord

# Nome do campo Python -> chave persistida
RESULT_FIELD_KEYS: dict[str, str] = {
    "non_reciprocal_following": "nonReciprocalFollowing",
    "non_reciprocal_followers": "nonReciprocalFollowers",
    "mutuals": "mutuals",
    "verified_pending": "verifiedPending",
    "reconfirmed_unfollows": "reconfirmedUnfollows",
    "blocked_passthrough": "blockedPassthrough",
}


@dataclass(frozen=True, slots=True)
class RelationshipResult:
    """Conjuntos derivados de uma análise.

    Atributos:
        non_reciprocal_following: following - followers (ordem de following)
        non_reciprocal_followers: followers - following (ordem de followers)
        mutuals: following ∩ followers (registros vindos de following)
        verified_pending: pending ∩ following (ordem de pending)
        reconfirmed_unfollows: unfollowed ∩ following (ordem de unfollowed)
        blocked_passthrough: blocked sem alteração
    """

    non_reciprocal_following: tuple[UserRecord, ...] = ()
    non_reciprocal_followers: tuple[UserRecord, ...] = ()
    mutuals: tuple[UserRecord, ...] = ()
    verified_pending: tuple[UserRecord, ...] = ()
    reconfirmed_unfollows: tuple[UserRecord, ...] = ()
    blocked_passthrough: tuple[UserRecord, ...] = ()

    def counts(self) -> dict[str, int]:
        """Quantidade de registros por campo (seguro para logs)."""
        return {f.name: len(getattr(self, f.name)) for f in fields(self)}

    def is_empty(self) -> bool:
        return not any(self.counts().values())

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serializa para documento (Firestore/JSON)."""
        return {
            key: [record.to_dict() for record in getattr(self, name)]
            for name, key in RESULT_FIELD_KEYS.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RelationshipResult:
        """Reconstrói a partir de documento persistido.

        Chaves ausentes viram tuplas vazias; entradas inválidas são ignoradas.
        """
        values: dict[str, tuple[UserRecord, ...]] = {}
        for name, key in RESULT_FIELD_KEYS.items():
            raw_items = data.get(key)
            if not isinstance(raw_items, list):
                values[name] = ()
                continue
            records = (UserRecord.from_dict(item) for item in raw_items)
            values[name] = tuple(r for r in records if r is not None)
        return cls(**values)


@dataclass(frozen=True, slots=True)
class FollowerSnapshot:
    """Foto dos usernames de seguidores em uma análise."""

    captured_at: datetime
    usernames: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "createdAt": self.captured_at,
            "followerCount": len(self.usernames),
            "followers": list(self.usernames),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FollowerSnapshot | None:
        created_at = data.get("createdAt")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        if not isinstance(created_at, datetime):
            return None
        followers = data.get("followers")
        if not isinstance(followers, list):
            followers = []
        return cls(
            captured_at=created_at,
            usernames=tuple(u for u in followers if isinstance(u, str) and u),
        )


@dataclass(frozen=True, slots=True)
class FollowerChange:
    """Diferença de seguidores entre a foto anterior e a lista atual."""

    lost: tuple[str, ...] = ()
    gained: tuple[str, ...] = ()

    @property
    def has_changes(self) -> bool:
        return bool(self.lost or self.gained)


@dataclass(frozen=True, slots=True)
class StoredAnalysis:
    """Último resultado persistido para restauração de sessão."""

    result: RelationshipResult
    captured_at: datetime | None = None
