"""Derivação de relacionamentos entre listas normalizadas.

Função pura: mesma entrada, mesma saída; sem IO, sem relógio, sem estado.
Cada lado é indexado uma única vez em um set de usernames (O(n)) e os
filtros usam lookups O(1); exports reais chegam a dezenas de milhares
de usuários.

Listas opcionais ausentes (None) equivalem a listas vazias.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.relationships import RelationshipResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.user_record import UserRecord


def derive(
    followers: Iterable[UserRecord] | None,
    following: Iterable[UserRecord] | None,
    pending: Iterable[UserRecord] | None = None,
    blocked: Iterable[UserRecord] | None = None,
    unfollowed: Iterable[UserRecord] | None = None,
) -> RelationshipResult:
    """Calcula RelationshipResult a partir de até cinco listas.

    Args:
        followers: Quem segue o usuário (obrigatória, pode ser vazia)
        following: Quem o usuário segue (obrigatória, pode ser vazia)
        pending: Pedidos de follow enviados
        blocked: Contas bloqueadas (repassada sem alteração)
        unfollowed: Contas marcadas como "deixaram de seguir"

    Returns:
        RelationshipResult com todos os campos preenchidos (vazios quando
        a lista de origem está ausente).
    """
    followers_list = _as_tuple(followers)
    following_list = _as_tuple(following)

    followers_set = membership_set(followers_list)
    following_set = membership_set(following_list)

    return RelationshipResult(
        non_reciprocal_following=_exclude(following_list, followers_set),
        non_reciprocal_followers=_exclude(followers_list, following_set),
        # Itera following: metadados de mutuals vêm da versão de following
        mutuals=_keep(following_list, followers_set),
        verified_pending=_keep(_as_tuple(pending), following_set),
        reconfirmed_unfollows=_keep(_as_tuple(unfollowed), following_set),
        blocked_passthrough=_as_tuple(blocked),
    )


def membership_set(records: Iterable[UserRecord]) -> frozenset[str]:
    """Set de usernames para testes de pertinência O(1)."""
    return frozenset(record.username for record in records)


def _as_tuple(records: Iterable[UserRecord] | None) -> tuple[UserRecord, ...]:
    if records is None:
        return ()
    return tuple(records)


def _keep(
    records: tuple[UserRecord, ...], members: frozenset[str]
) -> tuple[UserRecord, ...]:
    return tuple(r for r in records if r.username in members)


def _exclude(
    records: tuple[UserRecord, ...], members: frozenset[str]
) -> tuple[UserRecord, ...]:
    return tuple(r for r in records if r.username not in members)
