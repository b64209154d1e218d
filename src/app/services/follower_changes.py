"""Comparação entre a foto anterior de seguidores e a lista atual."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.relationships import FollowerChange

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.relationships import FollowerSnapshot
    from app.domain.user_record import UserRecord


def compare_follower_snapshots(
    previous: FollowerSnapshot | None,
    current_followers: Iterable[UserRecord],
) -> FollowerChange:
    """Retorna quem deixou de seguir e quem passou a seguir.

    Sem foto anterior não há base de comparação: retorna mudança vazia.

    Args:
        previous: Foto salva na análise anterior
        current_followers: Seguidores normalizados da análise atual

    Returns:
        FollowerChange com lost (ordem da foto) e gained (ordem atual).
    """
    if previous is None:
        return FollowerChange()

    current = [record.username for record in current_followers]
    current_set = frozenset(current)
    previous_set = frozenset(previous.usernames)

    return FollowerChange(
        lost=tuple(u for u in previous.usernames if u not in current_set),
        gained=tuple(u for u in current if u not in previous_set),
    )
