"""UserRecord: unidade canônica de identidade de uma lista exportada.

Toda lista (followers, following, pending, blocked, unfollowed) é reduzida
a uma sequência ordenada de UserRecord antes de qualquer comparação.
Username é a chave única dentro de uma lista; URL e timestamp só existem
quando a entrada estruturada os fornece.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ListCategory(str, Enum):
    """Categorias de lista aceitas pela análise."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"
    PENDING = "pending"
    BLOCKED = "blocked"
    UNFOLLOWED = "unfollowed"


# Sem estas duas listas não há comparação possível
REQUIRED_CATEGORIES: tuple[ListCategory, ...] = (
    ListCategory.FOLLOWERS,
    ListCategory.FOLLOWING,
)


@dataclass(frozen=True, slots=True)
class UserRecord:
    """Usuário normalizado.

    Atributos:
        username: Identificador não vazio, chave única dentro da lista
        profile_url: URL do perfil (apenas em exports estruturados)
        captured_at: Timestamp em segundos desde epoch (apenas em exports)
    """

    username: str
    profile_url: str | None = None
    captured_at: int | float | None = None

    def __post_init__(self) -> None:
        """Valida invariantes."""
        if not self.username:
            raise ValueError("username não pode ser vazio")

    def to_dict(self) -> dict[str, Any]:
        """Serializa para dict (chaves camelCase, sem campos None)."""
        data: dict[str, Any] = {"username": self.username}
        if self.profile_url is not None:
            data["profileUrl"] = self.profile_url
        if self.captured_at is not None:
            data["capturedAt"] = self.captured_at
        return data

    @classmethod
    def from_dict(cls, data: Any) -> UserRecord | None:
        """Reconstrói a partir de dict persistido.

        Retorna None quando o dict não tem username utilizável.
        """
        if not isinstance(data, dict):
            return None
        username = data.get("username")
        if not isinstance(username, str) or not username:
            return None
        profile_url = data.get("profileUrl")
        captured_at = data.get("capturedAt")
        return cls(
            username=username,
            profile_url=profile_url if isinstance(profile_url, str) else None,
            captured_at=captured_at if is_epoch_timestamp(captured_at) else None,
        )


@dataclass(frozen=True, slots=True)
class RawInput:
    """Texto bruto (arquivo ou colagem) de uma categoria. Transiente."""

    category: ListCategory
    text: str | None


@dataclass(frozen=True, slots=True)
class NormalizedList:
    """Sequência ordenada de UserRecord marcada com a categoria."""

    category: ListCategory
    records: tuple[UserRecord, ...] = ()

    @property
    def usernames(self) -> tuple[str, ...]:
        return tuple(record.username for record in self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self.records)


def is_epoch_timestamp(value: Any) -> bool:
    """Retorna True se value é um timestamp numérico aceitável."""
    # bool é subclasse de int e nunca é timestamp válido
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    # JSON aceita NaN/Infinity como tokens soltos
    return math.isfinite(value)
